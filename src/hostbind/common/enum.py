from enum import IntEnum


class NamedIntEnum(IntEnum):
    '''IntEnum rendered as a readable label in messages

    COPYABLE -> copyable, CLONE_ONLY -> clone-only
    '''

    def __str__(self):
        return self.name.lower().replace('_', '-')

    def __repr__(self):
        return f'{type(self).__name__}.{self.name}'
