"""
Error kinds raised by notate.

Every failure is a NotationError subclass carrying a `kind` tag.
"""


class NotationError(Exception):
    kind = 'NotationError'

    def __init__(self, message=''):
        self.message = message
        super().__init__(message)


class InvalidSourceError(NotationError):
    """
    Raised when a Tree source is not a mapping or list.
    """
    kind = 'InvalidSource'

    def __init__(self, message='Invalid source. Expected a dict or list.'):
        super().__init__(message)


class InvalidDestinationError(NotationError):
    """
    Raised when a copy/move target is not a mapping or list.
    """
    kind = 'InvalidDestination'

    def __init__(self, message='Invalid destination. Expected a dict or list.'):
        super().__init__(message)


class InvalidSyntaxError(NotationError, ValueError):
    """
    Raised when a notation or glob string violates the grammar.
    """
    kind = 'InvalidSyntax'

    def __init__(self, notation, what='notation'):
        self.notation = notation
        super().__init__(f'Invalid {what}: {notation!r}')


class MissingIndexError(NotationError):
    kind = 'MissingIndex'

    def __init__(self, notation):
        self.notation = notation
        super().__init__(f'Implied index does not exist: {notation!r}')


class MissingPropertyError(NotationError):
    kind = 'MissingProperty'

    def __init__(self, notation):
        self.notation = notation
        super().__init__(f'Implied property does not exist: {notation!r}')


class InsertOnNonListError(NotationError):
    kind = 'InsertOnNonList'

    def __init__(self, notation):
        self.notation = notation
        super().__init__(f'Cannot set value by inserting at index, on a non-list: {notation!r}')


class TypeMismatchError(NotationError):
    kind = 'TypeMismatch'


class IntegrityError(NotationError):
    """
    Raised when a negated wildcard glob would empty a container of the wrong type.
    """
    kind = 'IntegrityError'


class InvalidNotationsObjectError(NotationError):
    kind = 'InvalidNotationsObject'


def missing(notation, parent_is_array):
    """
    Build the strict-mode miss error for the parent kind.
    """
    if parent_is_array:
        return MissingIndexError(notation)
    return MissingPropertyError(notation)
