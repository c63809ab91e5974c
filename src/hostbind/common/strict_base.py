'''
Strict base class that prevents dynamic attribute assignment
'''

import inspect


class StrictBase:
    '''Base class that only allows annotated attributes

    Mirrors a host struct: the set of members is fixed by the class
    declaration, so a misspelled field raises instead of silently
    creating a new attribute. Annotations are collected across the MRO.
    '''
    _allowed_attrs_: frozenset[str]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        names = []
        for klass in reversed(cls.__mro__):
            for name in inspect.get_annotations(klass):
                if name != '_allowed_attrs_' and name not in names:
                    names.append(name)

        cls._allowed_attrs_ = frozenset(names)
        cls._declared_attrs_ = tuple(names)

    def __setattr__(self, name, value):
        if name not in self._allowed_attrs_:
            raise AttributeError(f'{type(self).__name__!r} has no attribute {name!r}')

        return object.__setattr__(self, name, value)

    @classmethod
    def declared_attributes(cls) -> tuple[str, ...]:
        '''Annotated attribute names in declaration order'''
        return cls._declared_attrs_
