class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(DomainError):
    """Raised when an id, amount or category cannot be read from user input."""


class NotFoundError(DomainError):
    """Raised when a referenced employee does not exist."""


class SelectionCancelled(DomainError):
    """Raised when the user declines to choose a required option."""


class PersistenceError(DomainError):
    """Raised when the employee store cannot be written or read."""


class StoreNotFoundError(PersistenceError):
    """Raised when there is no saved data yet."""
