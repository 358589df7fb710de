class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced company, cafeteria, employee or tablet does not exist."""


class InvalidReferenceError(DomainError):
    """Raised when an employee does not belong to the stated cafeteria."""


class ConflictError(DomainError):
    """Raised when creating an entity whose unique key already exists."""


class StorageUnavailableError(DomainError):
    """Raised when the database cannot be reached."""
