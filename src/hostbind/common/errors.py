'''
Error taxonomy for binding registration, construction and embedding

Every error records the operation, the type it was applied to and, when
relevant, the offending argument, so a failure can be diagnosed from the
message alone.
'''


class HostBindError(Exception):
    '''Base class for all hostbind errors'''

    def __init__(self, operation: str, type_name: str | None, message: str, argument: str | None = None):
        self.operation = operation
        self.type_name = type_name
        self.argument = argument
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        where = self.operation
        if self.type_name:
            where = f'{self.type_name}.{self.operation}'

        if self.argument is not None:
            return f'{where}: {self.message} (argument {self.argument!r})'

        return f'{where}: {self.message}'


class RegistrationError(HostBindError, TypeError):
    '''Type lacks the capability an adapter requires; raised at module load'''


class ArgumentError(HostBindError, TypeError):
    '''Keyword constructor called with an unknown, duplicate or positional argument'''


class CloneFailure(HostBindError, RuntimeError):
    '''Host clone operation produced no usable object'''


class NamespaceError(HostBindError, RuntimeError):
    '''Bridge used without a live embedding instance, or on a stale namespace'''


class EmbeddingError(HostBindError, RuntimeError):
    '''A second embedding instance was requested while one is live'''
