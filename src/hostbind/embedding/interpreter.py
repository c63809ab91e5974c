'''
Scoped lifetime guard of the embedding instance

At most one instance is live per process. Each instance owns a fresh
global namespace and a generation number; namespaces touched by the bridge
are stamped with that generation so they cannot leak into a later
instance.

    with ScopedInterpreter() as interp:
        m = new_module('pkg.test.example')
        load_auxiliary_code(m)
        synchronize_namespaces(m)
        interp.evaluate('check_copy(copy.copy, Value(10))')
'''

import builtins
import logging
import types
import weakref
from typing import Any, Dict, Optional

from ..common.errors import EmbeddingError, NamespaceError

logger = logging.getLogger(__name__)


class ScopedInterpreter:
    '''The single live embedding instance'''

    _live: Optional['ScopedInterpreter'] = None
    _generation = 0

    def __init__(self):
        if ScopedInterpreter._live is not None:
            raise EmbeddingError(
                'ScopedInterpreter', None,
                f'embedding instance {ScopedInterpreter._live.generation} is still live',
            )

        ScopedInterpreter._generation += 1
        self.generation = ScopedInterpreter._generation
        self.globals: Dict[str, Any] = {'__name__': '__main__', '__builtins__': builtins}
        self.shared: Dict[str, Any] = {}
        self.loaded: weakref.WeakSet = weakref.WeakSet()
        self.alive = True
        ScopedInterpreter._live = self

        logger.debug('Embedding instance %d started', self.generation)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def close(self):
        '''Tear the instance down; a no-op when already closed'''
        if not self.alive:
            return

        self.alive = False
        self.globals.clear()
        self.shared.clear()
        self.loaded.clear()
        if ScopedInterpreter._live is self:
            ScopedInterpreter._live = None

        logger.debug('Embedding instance %d torn down', self.generation)

    def _require_alive(self, operation: str):
        if not self.alive:
            raise NamespaceError(operation, None, f'embedding instance {self.generation} was torn down')

    def share(self, name: str, value: Any):
        '''Publish value in the global namespace and mark it for synchronization'''
        self._require_alive('share')
        self.shared[name] = value
        self.globals[name] = value

    def evaluate(self, expr: str, target: types.ModuleType = None) -> Any:
        '''Evaluate expr against the globals, with target's bindings as locals'''
        self._require_alive('evaluate')
        local_ns = target.__dict__ if target is not None else None
        return eval(expr, self.globals, local_ns)

    def __repr__(self):
        state = 'live' if self.alive else 'closed'
        return f'<ScopedInterpreter generation={self.generation} {state}>'


def current_interpreter(operation: str = 'current_interpreter') -> ScopedInterpreter:
    '''Return the live embedding instance

    Raises:
        NamespaceError: If no instance is live
    '''
    interp = ScopedInterpreter._live
    if interp is None:
        raise NamespaceError(operation, None, 'no live embedding instance')
    return interp


def is_live() -> bool:
    return ScopedInterpreter._live is not None
