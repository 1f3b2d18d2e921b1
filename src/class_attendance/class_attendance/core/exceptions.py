class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is malformed (coordinates, ids, filters)."""


class NotFoundError(DomainError):
    """Raised when a referenced schedule or location does not exist."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class DuplicateAttendanceError(DomainError):
    """Raised by storage when the attendance uniqueness guard rejects an insert."""
