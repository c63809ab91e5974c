'''
Host copy traits

A host type declares its copy semantics explicitly with a class decorator,
the same way a host struct opts in or out of its copy constructor:

    @default_copy_and_move
    class Point(StrictBase):
        ...

    @no_copy_no_move
    class Body(StrictBase):
        def clone(self) -> 'Body':
            ...

Untagged classes are treated as copy-constructible.
'''

import copy

from ..common.config import get_config
from ..common.enum import NamedIntEnum

TRAIT_ATTR = '__copy_trait__'


class CopyTrait(NamedIntEnum):
    '''Copy capability of a host type, selected once at registration time'''
    COPYABLE        = 1     # native copy constructor
    CLONE_ONLY      = 2     # copy disabled, owning clone() available
    NON_COPYABLE    = 3     # copy disabled, no clone


def default_copy_and_move(cls):
    '''Tag cls as copy-constructible'''
    setattr(cls, TRAIT_ATTR, CopyTrait.COPYABLE)
    return cls


def no_copy_no_move(cls):
    '''Tag cls as non-copyable and make the runtime copy protocol refuse it

    Registering a clone adapter afterwards replaces the refusing hooks.
    '''
    name = cls.__name__

    def refuse(self, *args):
        raise TypeError(f'{name!r} is not copyable or movable')

    setattr(cls, TRAIT_ATTR, CopyTrait.NON_COPYABLE)
    cls.__copy__ = refuse
    cls.__deepcopy__ = refuse
    cls.__reduce_ex__ = refuse
    return cls


def has_clone(cls) -> bool:
    return callable(getattr(cls, get_config().clone_method, None))


def copy_trait(cls) -> CopyTrait:
    '''Resolve the copy trait of a host class'''
    tag = getattr(cls, TRAIT_ATTR, CopyTrait.COPYABLE)
    if tag == CopyTrait.COPYABLE:
        return CopyTrait.COPYABLE

    return CopyTrait.CLONE_ONLY if has_clone(cls) else CopyTrait.NON_COPYABLE


def _slot_names(cls):
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)

        for name in slots:
            if name not in ('__dict__', '__weakref__'):
                yield name


def copy_construct(obj):
    '''Host copy constructor: member-wise copy into a fresh instance

    The new instance is created without running __init__, so a keyword
    constructor or a private constructor never interferes with copying.
    Members are shared with the source, as in a shallow copy.
    '''
    cls = type(obj)
    other = cls.__new__(cls)
    return _copy_members(obj, other, cls, None)


def _copy_members(obj, other, cls, copy_member):
    state = getattr(obj, '__dict__', None)
    if state is not None:
        if copy_member is None:
            other.__dict__.update(state)
        else:
            other.__dict__.update({name: copy_member(value) for name, value in state.items()})

    for name in _slot_names(cls):
        try:
            value = object.__getattribute__(obj, name)
        except AttributeError:
            # Unset slot stays unset
            continue

        if copy_member is not None:
            value = copy_member(value)
        object.__setattr__(other, name, value)

    return other


def deep_copy_construct(obj, memo = None):
    '''Host copy constructor that also copies every member recursively

    The fresh instance is entered in memo before its members are copied,
    so a member referring back to obj resolves to the copy.
    '''
    if memo is None:
        memo = {}

    cls = type(obj)
    other = cls.__new__(cls)
    memo[id(obj)] = other
    return _copy_members(obj, other, cls, lambda value: copy.deepcopy(value, memo))
