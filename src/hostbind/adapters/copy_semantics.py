'''Shallow and deep copy for copy-constructible host types'''

import logging

from ..binding.registry import WrappedType
from ..binding.traits import CopyTrait, copy_construct, copy_trait, deep_copy_construct
from ..common.errors import RegistrationError

logger = logging.getLogger(__name__)


def register_copy_and_deep_copy(wrapped: WrappedType) -> WrappedType:
    '''Register __copy__ and __deepcopy__ backed by the host copy constructor

    Both operations return a new instance equal to the source. The shallow
    copy shares member values; the deep copy copies every member
    recursively, so mutating a nested member of one never affects the other.

    Raises:
        RegistrationError: If the host type is not copy-constructible
    '''
    trait = copy_trait(wrapped.cls)
    if trait != CopyTrait.COPYABLE:
        raise RegistrationError(
            'register_copy_and_deep_copy', wrapped.name,
            f'host type is {trait}, not copy-constructible'
            + ('; use register_clone' if trait == CopyTrait.CLONE_ONLY else ''),
        )

    def __copy__(self):
        return copy_construct(self)

    def __deepcopy__(self, memo):
        return deep_copy_construct(self, memo)

    wrapped.def_operation('__copy__', __copy__)
    wrapped.def_operation('__deepcopy__', __deepcopy__)

    logger.debug('Registered copy and deepcopy for %s', wrapped.qualified_name)
    return wrapped
