"""
Domain exceptions.

The three kinds surfaced by the order core. Anything else raised while an
operation runs (database connectivity, constraint violations) is a generic
failure and propagates untouched.
"""


class DomainError(Exception):
    """Base class for errors raised by domain rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Referenced tenant or order does not resolve within the caller's scope."""


class OrderValidationError(DomainError, ValueError):
    """Caller supplied malformed or semantically invalid input."""


class ConflictError(DomainError):
    """Entities exist but the requested change is not allowed in the current state."""
