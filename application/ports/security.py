"""
Credential Interfaces (Ports).

Use cases depend on these protocols rather than on bcrypt or PyJWT
directly, so tests can swap in cheaper implementations.
"""
from typing import Protocol


class PasswordHasher(Protocol):
    """One-way salted hashing of plaintext passwords."""

    def hash(self, plaintext: str) -> str:
        """
        Produce a salted digest of ``plaintext``.

        Raises:
            BadRequestError: The password cannot be hashed faithfully.
            InternalError: Hashing failed.
        """
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check ``plaintext`` against ``hashed``. Never raises on mismatch."""
        ...


class TokenService(Protocol):
    """Issues and validates signed, time-limited identity tokens."""

    def issue(self, subject: str) -> str:
        """Create a token binding ``subject`` (the username)."""
        ...

    def validate(self, token: str) -> str:
        """
        Return the subject embedded in ``token``.

        Raises:
            InvalidTokenError: Malformed, badly signed, or wrong algorithm.
            TokenExpiredError: The token's expiry has passed.
        """
        ...
