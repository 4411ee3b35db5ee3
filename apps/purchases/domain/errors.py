"""
Domain errors.
Business rule violations raised by entities and rate providers.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ValidationError(DomainError):
    """Raised when a purchase transaction is built from malformed input."""
    pass


class RateSourceError(DomainError):
    """Raised when the rate source cannot be reached or returns garbage."""
    pass
