'''Wrapped type registration and host copy traits'''

from .registry import *
from .traits import *

__all__ = [
    # Registration
    'FieldDescriptor',
    'WrappedType',
    'TypeRegistry',
    'get_registry',
    'new_module',
    'bind_class',

    # Traits
    'CopyTrait',
    'default_copy_and_move',
    'no_copy_no_move',
    'copy_trait',
    'copy_construct',
    'deep_copy_construct',
]
