'''Adapters attaching runtime copy and construction protocols to wrapped types'''

from .copy_semantics import *
from .clone_semantics import *
from .keyword_init import *

__all__ = [
    'register_copy_and_deep_copy',
    'register_clone',
    'register_keyword_constructor',
    'KeywordConstructor',
]
