'''
Script environment bridge

Loads auxiliary runtime-side code into a target namespace and reconciles
that namespace with the global namespace of the live embedding instance.
Neither operation interprets the loaded code; they only guarantee name
visibility.
'''

import logging
import types
import weakref
from pathlib import Path
from typing import List, Optional

from ..common.config import get_config
from ..common.errors import NamespaceError
from .interpreter import ScopedInterpreter, current_interpreter

logger = logging.getLogger(__name__)

BUNDLED_AUX_DIR = Path(__file__).parent / 'extra'

# target namespace -> generation of the instance that first touched it
_stamps: 'weakref.WeakKeyDictionary[types.ModuleType, int]' = weakref.WeakKeyDictionary()


def _claim(target: types.ModuleType, interp: ScopedInterpreter, operation: str):
    stamp = _stamps.get(target)
    if stamp is not None and stamp != interp.generation:
        raise NamespaceError(
            operation, target.__name__,
            f'namespace belongs to torn-down embedding instance {stamp}',
        )
    _stamps[target] = interp.generation


def aux_search_paths() -> List[Path]:
    '''Configured directories first, bundled auxiliary code last'''
    return get_config().aux_paths + [BUNDLED_AUX_DIR]


def find_auxiliary_code(module_name: str) -> Optional[Path]:
    '''Locate the auxiliary file of a module, keyed on its last dotted component'''
    short_name = module_name.rsplit('.', 1)[-1]
    file_name = get_config().aux_file_pattern.format(name = short_name)

    for directory in aux_search_paths():
        candidate = directory / file_name
        if candidate.is_file():
            return candidate

    return None


def load_auxiliary_code(target: types.ModuleType) -> Path:
    '''Execute the module's auxiliary code inside target's namespace

    Loading is once per namespace and embedding instance: repeated calls
    for the same module object return the file without executing it again.
    A different module object with the same name gets its own copy.

    Raises:
        NamespaceError: Without a live instance, on a stale namespace, or
            when no auxiliary file exists
    '''
    operation = 'load_auxiliary_code'
    interp = current_interpreter(operation)
    _claim(target, interp, operation)

    path = find_auxiliary_code(target.__name__)
    if path is None:
        searched = ', '.join(str(p) for p in aux_search_paths())
        raise NamespaceError(operation, target.__name__, f'no auxiliary code found in: {searched}')

    if target in interp.loaded:
        logger.debug('Auxiliary code for %s already loaded', target.__name__)
        return path

    code = compile(path.read_text(encoding = 'utf-8'), str(path), 'exec')
    exec(code, target.__dict__)
    interp.loaded.add(target)

    logger.debug('Loaded auxiliary code %s into %s', path, target.__name__)
    return path


def synchronize_namespaces(target: types.ModuleType) -> List[str]:
    '''Make target's bindings resolvable from the global namespace

    Every non-dunder binding of target is published into the instance
    globals. Names shared through ScopedInterpreter.share() are copied into
    target unless target already defines them. Returns the published names.

    Raises:
        NamespaceError: Without a live instance or on a stale namespace
    '''
    operation = 'synchronize_namespaces'
    interp = current_interpreter(operation)
    _claim(target, interp, operation)

    namespace = vars(target)
    for name, value in interp.shared.items():
        if name not in namespace:
            namespace[name] = value

    exported = {name: value for name, value in namespace.items() if not name.startswith('__')}
    interp.globals.update(exported)

    logger.debug('Synchronized %d names from %s', len(exported), target.__name__)
    return sorted(exported)
