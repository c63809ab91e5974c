'''Embedding instance lifetime and namespace bridge'''

from .interpreter import *
from .bridge import *

__all__ = [
    'ScopedInterpreter',
    'current_interpreter',
    'is_live',
    'find_auxiliary_code',
    'load_auxiliary_code',
    'synchronize_namespaces',
]
