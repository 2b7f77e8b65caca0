class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a value cannot be turned into a domain object."""


class InvalidInputKindError(DomainError, TypeError):
    """Raised when a caller hands over the wrong kind of collection.

    This is a contract violation by the caller, not a data-quality problem,
    and should not be shown to end users.
    """
