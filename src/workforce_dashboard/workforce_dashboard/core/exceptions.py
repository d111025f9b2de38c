class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, project or record does not exist."""


class PersistenceError(DomainError):
    """Raised when the backing store fails to load or save data."""


class SaveInProgressError(DomainError):
    """Raised when a save is requested while another one is still outstanding."""
