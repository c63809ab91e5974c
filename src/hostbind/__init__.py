"""
hostbind: copy, clone and keyword-construction adapters for host value types

Attach the runtime's object-lifecycle protocol to classes with explicit
host copy semantics, and bridge auxiliary code into the embedding
instance's namespaces.
"""

__version__ = "0.1.0"

from .common import *
from .binding import *
from .adapters import *
from .embedding import *

__all__ = [
    # Configuration and errors
    "get_config", "init_config",
    "HostBindError", "RegistrationError", "ArgumentError",
    "CloneFailure", "NamespaceError", "EmbeddingError",
    "StrictBase",

    # Registration
    "WrappedType", "FieldDescriptor", "TypeRegistry", "get_registry",
    "new_module", "bind_class",
    "CopyTrait", "default_copy_and_move", "no_copy_no_move", "copy_trait", "copy_construct", "deep_copy_construct",

    # Adapters
    "register_copy_and_deep_copy", "register_clone", "register_keyword_constructor",
    "KeywordConstructor",

    # Embedding
    "ScopedInterpreter", "current_interpreter",
    "load_auxiliary_code", "synchronize_namespaces",
]
