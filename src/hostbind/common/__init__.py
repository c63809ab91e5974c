'''Shared infrastructure: configuration, errors, strict records'''

from .config import *
from .enum import *
from .errors import *
from .strict_base import *

__all__ = [
    # Configuration
    'Config',
    'get_config',
    'init_config',

    # Errors
    'HostBindError',
    'RegistrationError',
    'ArgumentError',
    'CloneFailure',
    'NamespaceError',
    'EmbeddingError',

    # Records
    'NamedIntEnum',
    'StrictBase',
]
