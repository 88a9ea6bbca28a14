"""Domain-level exceptions.

All user-facing failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display plain messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """User input or a field value failed a check."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The catalog snapshot could not be written.

    The previously stored snapshot is left untouched.
    """


class AuthenticationError(DomainException):
    """The operation requires a logged-in admin."""
