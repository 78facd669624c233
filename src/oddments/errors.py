"""Errors raised by the catalog core.

Every class here is an application-level failure: its message is safe to show
to the person at the keyboard. Anything else escaping an operation is treated
as internal and replaced by `InternalError` in `oddments.shield.guard`.
"""


class CatalogError(Exception):
    """Base error for this package."""


class ValidationError(CatalogError):
    """Raised when user input cannot be turned into a field value."""


class NullInputError(ValidationError):
    """Raised when no input was given at all."""


class EmptyInputError(ValidationError):
    """Raised when nothing is left after sanitizing."""


class TooLongError(ValidationError):
    """Raised when the sanitized input exceeds the field limit."""


class NotFoundError(CatalogError):
    """Raised when deleting a record id that is not stored."""


class StorageError(CatalogError):
    """Raised when the backing file cannot be accessed.

    The low-level cause is chained (``raise ... from``) but never part of the
    message.
    """


class ReadError(StorageError):
    """Raised when the backing file cannot be read."""


class WriteError(StorageError):
    """Raised when the backing file cannot be written."""


class InternalError(CatalogError):
    """Raised by the guard in place of an unexpected failure."""
