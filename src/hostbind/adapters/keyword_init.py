'''
Keyword-argument construction for host struct types

    wrapped = bind_class(m, 'Params', Params)
    wrapped.def_readwrite('a').def_readwrite('b')
    register_keyword_constructor(wrapped)

    m.Params(b = 20)        # default-constructed, then b overridden

Arguments are validated as a whole before the default constructor runs,
and overrides are applied in field declaration order, so the caller's
argument order never changes the result.
'''

import inspect
import logging
from typing import Any, Callable, Iterable, List, Tuple

from ..binding.registry import FieldDescriptor, WrappedType
from ..common.errors import ArgumentError, RegistrationError

logger = logging.getLogger(__name__)

OPERATION = '__init__'


class KeywordConstructor:
    '''Construction from named field overrides'''

    def __init__(self, wrapped: WrappedType, default_init: Callable):
        self.wrapped = wrapped
        self.default_init = default_init

    @property
    def fields(self) -> List[FieldDescriptor]:
        return self.wrapped.field_list()

    def validate(self, pairs: Iterable[Tuple[str, Any]]) -> List[Tuple[FieldDescriptor, Any]]:
        '''Check every name and return overrides in field declaration order

        Raises:
            ArgumentError: On an unknown or repeated name
        '''
        known = self.wrapped.fields
        supplied = {}
        for name, value in pairs:
            if name not in known:
                raise ArgumentError(
                    OPERATION, self.wrapped.name,
                    f'unknown argument; expected one of: {", ".join(known)}',
                    argument = name,
                )

            if name in supplied:
                raise ArgumentError(OPERATION, self.wrapped.name, 'argument supplied twice', argument = name)

            supplied[name] = value

        return [(desc, supplied[desc.name]) for desc in self.fields if desc.name in supplied]

    def initialize(self, obj, pairs: Iterable[Tuple[str, Any]]):
        '''Default-construct obj in place, then apply the overrides'''
        overrides = self.validate(pairs)
        self.default_init(obj)
        for desc, value in overrides:
            desc.setter(obj, value)

    def construct(self, pairs: Iterable[Tuple[str, Any]]):
        '''Build a new instance from an explicit (name, value) sequence'''
        cls = self.wrapped.cls
        obj = cls.__new__(cls)
        self.initialize(obj, pairs)
        return obj

    def signature(self) -> inspect.Signature:
        '''Keyword-only signature with the default-constructed values'''
        params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_ONLY)]
        for desc in self.fields:
            default = desc.default if desc.has_default else inspect.Parameter.empty
            params.append(inspect.Parameter(desc.name, inspect.Parameter.KEYWORD_ONLY, default = default))

        return inspect.Signature(params)


def _check_default_constructible(wrapped: WrappedType, default_init: Callable):
    try:
        inspect.signature(default_init).bind(None)

    except TypeError:
        raise RegistrationError(
            'register_keyword_constructor', wrapped.name,
            'host type is not default-constructible',
        ) from None

    except ValueError:
        # No introspectable signature (e.g. object.__init__); assume it takes none
        pass


def register_keyword_constructor(wrapped: WrappedType) -> WrappedType:
    '''Install __init__(self, **kwargs) over the declared fields

    Raises:
        RegistrationError: If no fields are declared or the host type has no
            default constructor
    '''
    if not wrapped.fields:
        raise RegistrationError('register_keyword_constructor', wrapped.name, 'no exposed fields declared')

    cls = wrapped.cls
    default_init = cls.__init__
    _check_default_constructible(wrapped, default_init)

    # Capture defaults before the host constructor is replaced
    sample = cls.__new__(cls)
    default_init(sample)
    for desc in wrapped.field_list():
        try:
            desc.default = desc.getter(sample)
        except AttributeError:
            # Left unset by the default constructor; stays without a default
            logger.debug('%s.%s has no default value', wrapped.qualified_name, desc.name)

    constructor = KeywordConstructor(wrapped, default_init)
    type_name = wrapped.name

    def __init__(self, *args, **kwargs):
        if args:
            raise ArgumentError(
                OPERATION, type_name,
                f'takes keyword arguments only, got {len(args)} positional',
            )

        constructor.initialize(self, kwargs.items())

    __init__.__signature__ = constructor.signature()
    __init__.__doc__ = f'{type_name}({", ".join(f"{d.name}=..." for d in constructor.fields)})'

    wrapped.keyword_constructor = constructor
    wrapped.def_operation(OPERATION, __init__)

    logger.debug('Registered keyword constructor for %s over %s', wrapped.qualified_name, list(wrapped.fields))
    return wrapped
