"""
Signed identity tokens (HS256 JWT).

Tokens carry the username as ``sub`` (mirrored in a ``username`` claim for
older clients) and a short absolute expiry. Only HS256 is accepted on the
way back in: tokens signed with any other algorithm, ``none`` included,
are rejected before their claims are trusted.
"""
import logging
import time
from typing import Callable, Optional

import jwt

from application.errors import InvalidTokenError, TokenExpiredError
from backend.settings import MAX_TOKEN_TTL_SECONDS

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 5 * 60


class JWTTokenService:
    """
    Issues and validates HS256 tokens with a secret injected at construction.

    Args:
        secret: Symmetric signing key, must not be empty
        ttl_seconds: Token lifetime, capped at MAX_TOKEN_TTL_SECONDS
        leeway_seconds: Clock skew tolerated when checking expiry
        clock: Returns the current time in epoch seconds, used when issuing
    """

    def __init__(
        self,
        secret: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        *,
        leeway_seconds: int = 0,
        clock: Optional[Callable[[], float]] = None,
    ):
        if not secret or not secret.strip():
            raise ValueError("Token signing secret must not be empty")
        if not 0 < ttl_seconds <= MAX_TOKEN_TTL_SECONDS:
            raise ValueError(
                f"Token TTL must be between 1 and {MAX_TOKEN_TTL_SECONDS} seconds"
            )
        self._secret = secret
        self._ttl_seconds = ttl_seconds
        self._leeway_seconds = leeway_seconds
        self._clock = clock or time.time

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, subject: str) -> str:
        now = int(self._clock())
        payload = {
            "sub": subject,
            "username": subject,
            "iat": now,
            "exp": now + self._ttl_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def validate(self, token: str) -> str:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "sub"]},
                leeway=self._leeway_seconds,
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError(developer_message=str(e)) from e
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError(developer_message=str(e)) from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.strip():
            raise InvalidTokenError(developer_message="token has an empty subject")
        return subject
