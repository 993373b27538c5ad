"""
Typed failures raised by use cases, token handling and repositories.

Every failure carries a client-facing ``message`` and an optional
``developer_message`` with diagnostic detail. The API layer maps each class
to an HTTP status in ``api.errors``; nothing below the routers knows about
status codes.
"""

from typing import Optional


class JournalError(Exception):
    """Base class for all expected failures of the journal."""

    default_message = "internal system error"

    def __init__(
        self,
        message: Optional[str] = None,
        developer_message: str = "",
    ):
        self.message = message or self.default_message
        self.developer_message = developer_message
        super().__init__(self.message)


class BadRequestError(JournalError):
    """Input is malformed or a required field is missing."""

    default_message = "Invalid request"


class UnauthorizedError(JournalError):
    """Credential missing, invalid, or expired; or password mismatch."""

    default_message = "Unauthorized"


class InvalidTokenError(UnauthorizedError):
    """Token is malformed, badly signed, or uses an unexpected algorithm."""

    default_message = "Invalid token"


class TokenExpiredError(UnauthorizedError):
    """Token signature is valid but its expiry has passed."""

    default_message = "Token expired"


class ConflictError(JournalError):
    """Write conflicts with existing state (duplicate username, stale version)."""

    default_message = "Conflict"


class NotFoundError(JournalError):
    """User, workout, exercise or set does not exist."""

    default_message = "Resource not found"


class InternalError(JournalError):
    """Unexpected failure inside the service."""


class StorageError(InternalError):
    """The storage backend failed or returned an unusable response."""
