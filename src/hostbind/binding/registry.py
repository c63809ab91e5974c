'''
Wrapped type registration table

A WrappedType is the handle of a host class exposed to the runtime under a
name in a target module. Adapters attach operations to the handle; the
TypeRegistry owns it.
'''

import logging
import operator
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..common.errors import RegistrationError
from ..common.strict_base import StrictBase

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(eq = False)
class FieldDescriptor(StrictBase):
    '''Exposed mutable field: name plus accessor pair'''
    name: str
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]
    default: Any = _UNSET

    @property
    def has_default(self) -> bool:
        return self.default is not _UNSET

    def __repr__(self):
        if self.has_default:
            return f'FieldDescriptor({self.name!r}, default={self.default!r})'
        return f'FieldDescriptor({self.name!r})'


def _attribute_setter(name: str):
    def setter(obj, value):
        setattr(obj, name, value)

    return setter


class WrappedType(StrictBase):
    '''Registration handle of one host class'''

    cls: type
    name: str
    module: types.ModuleType
    registry: 'TypeRegistry'
    fields: Dict[str, FieldDescriptor]
    operations: Dict[str, Callable]
    keyword_constructor: Optional[Any]

    def __init__(self, cls: type, name: str, module: types.ModuleType, registry: 'TypeRegistry'):
        self.cls = cls
        self.name = name
        self.module = module
        self.registry = registry
        self.fields = {}
        self.operations = {}
        self.keyword_constructor = None

    @property
    def qualified_name(self) -> str:
        return f'{self.module.__name__}.{self.name}'

    def def_readwrite(self, name: str, getter: Callable = None, setter: Callable = None) -> 'WrappedType':
        '''Declare an exposed mutable field

        Without explicit accessors the field maps onto the host attribute of
        the same name.
        '''
        if name in self.fields:
            raise RegistrationError('def_readwrite', self.name, 'field declared twice', argument = name)

        if self.keyword_constructor is not None:
            raise RegistrationError(
                'def_readwrite', self.name,
                'fields cannot be declared after the keyword constructor is registered',
                argument = name,
            )

        self.fields[name] = FieldDescriptor(
            name = name,
            getter = getter or operator.attrgetter(name),
            setter = setter or _attribute_setter(name),
        )
        return self

    def field_list(self) -> List[FieldDescriptor]:
        '''Fields in declaration order'''
        return list(self.fields.values())

    def def_operation(self, name: str, function: Callable) -> 'WrappedType':
        '''Attach an operation to the host class under name'''
        if name in self.operations:
            logger.debug('Replacing operation %s on %s', name, self.qualified_name)

        function.__qualname__ = f'{self.cls.__qualname__}.{name}'
        setattr(self.cls, name, function)
        self.operations[name] = function
        return self

    def has_operation(self, name: str) -> bool:
        return name in self.operations

    def __repr__(self):
        return f'<WrappedType {self.qualified_name} ({self.cls.__qualname__})>'


class TypeRegistry:
    '''Registration table of all wrapped types'''

    def __init__(self):
        self.types: Dict[type, WrappedType] = {}
        self.modules: Dict[str, List[str]] = {}

    def register(self, wrapped: WrappedType):
        '''Register a wrapped type'''
        if wrapped.cls in self.types:
            existing = self.types[wrapped.cls]
            raise RegistrationError(
                'bind_class', wrapped.name,
                f'host class already registered as {existing.qualified_name}',
            )

        self.types[wrapped.cls] = wrapped

        # Add to module index
        module_name = wrapped.module.__name__
        if module_name not in self.modules:
            self.modules[module_name] = []
        self.modules[module_name].append(wrapped.name)

    def get(self, cls: type) -> Optional[WrappedType]:
        '''Get wrapped type by host class'''
        return self.types.get(cls)

    def lookup(self, cls: type) -> WrappedType:
        wrapped = self.types.get(cls)
        if wrapped is None:
            raise RegistrationError('lookup', cls.__name__, 'host class is not registered')
        return wrapped

    def list_by_module(self, module_name: str) -> List[str]:
        '''List all exposed names of a module'''
        return self.modules.get(module_name, [])

    def __contains__(self, cls: type) -> bool:
        return cls in self.types

    def __len__(self) -> int:
        return len(self.types)


# Process-wide registration table
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    '''Get the process-wide registration table'''
    return _registry


def new_module(name: str, doc: str = None) -> types.ModuleType:
    '''Create a target namespace'''
    return types.ModuleType(name, doc)


def bind_class(module: types.ModuleType, name: str, cls: type, registry: TypeRegistry = None) -> WrappedType:
    '''Expose host class cls as module.<name> and return its handle'''
    if registry is None:
        registry = _registry

    wrapped = WrappedType(cls, name, module, registry)
    registry.register(wrapped)
    setattr(module, name, cls)

    logger.debug('Bound %s as %s', cls.__qualname__, wrapped.qualified_name)
    return wrapped
