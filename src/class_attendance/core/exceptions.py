class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request data is missing or malformed."""


class PersistenceError(DomainError):
    """Raised when the relational store fails (connectivity, constraints, SQL)."""
