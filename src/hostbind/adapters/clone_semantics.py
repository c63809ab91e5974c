'''
Copy protocol for host types that disable native copy but expose clone()

The host clone method is replaced by a checked wrapper, and __copy__ /
__deepcopy__ delegate to that wrapper. The type itself stays
non-copyable at the host level; only the owning clone is used.
'''

import functools
import logging

from ..binding.registry import WrappedType
from ..binding.traits import CopyTrait, copy_trait
from ..common.config import get_config
from ..common.errors import CloneFailure, RegistrationError

logger = logging.getLogger(__name__)


def register_clone(wrapped: WrappedType) -> WrappedType:
    '''Register clone, __copy__ and __deepcopy__ via the host clone method

    Raises:
        RegistrationError: If the host type has no callable clone method
    '''
    method = get_config().clone_method
    host_clone = getattr(wrapped.cls, method, None)
    if not callable(host_clone):
        raise RegistrationError(
            'register_clone', wrapped.name,
            f'host type has no callable {method}() operation',
        )

    if copy_trait(wrapped.cls) == CopyTrait.COPYABLE:
        logger.debug('%s is copy-constructible; copies still go through %s()', wrapped.qualified_name, method)

    type_name = wrapped.name

    @functools.wraps(host_clone)
    def clone(self):
        result = host_clone(self)
        if result is None:
            raise CloneFailure(method, type_name, 'clone operation returned no object')

        if result is self:
            raise CloneFailure(method, type_name, 'clone operation returned the source instance')

        return result

    def __copy__(self):
        return clone(self)

    def __deepcopy__(self, memo):
        return clone(self)

    wrapped.def_operation(method, clone)
    wrapped.def_operation('__copy__', __copy__)
    wrapped.def_operation('__deepcopy__', __deepcopy__)

    logger.debug('Registered %s-based copy for %s', method, wrapped.qualified_name)
    return wrapped
