'''Auxiliary checks executed into the `hostbind.testing` namespace'''

import copy


def check_copy(copy_function, obj):
    '''Checks `copy_function` to ensure `obj` is equal to its copy, and that
    it is not the same instance.'''
    obj_copy = copy_function(obj)
    return obj == obj_copy and obj is not obj_copy


def check_fields(obj, **expected):
    '''Checks that each named field of `obj` holds the expected value.'''
    return all(getattr(obj, name) == value for name, value in expected.items())
