"""
Bearer token authentication for protected routes.

The FastAPI dependency wrapping this module lives in ``api.deps``
(``get_current_identity``); this module holds the header parsing and token
check so it can be used without a request object.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from application.errors import UnauthorizedError
from application.ports import TokenService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Attribute of ``request.state`` that holds the resolved Identity.
IDENTITY_STATE_KEY = "identity"


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as proven by a valid token."""

    username: str


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization`` header value.

    Raises:
        UnauthorizedError: Header missing, or not a ``Bearer`` credential.
    """
    if not authorization:
        raise UnauthorizedError("Authorization header is missing")
    if not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Invalid token format")

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("Invalid token format")
    return token


def authenticate_header(
    authorization: Optional[str],
    token_service: TokenService,
) -> Identity:
    """
    Validate the bearer credential and return the caller's identity.

    Raises:
        UnauthorizedError: Missing, malformed, invalid or expired credential.
    """
    token = extract_bearer_token(authorization)
    username = token_service.validate(token)
    logger.debug("Authenticated request for user %r", username)
    return Identity(username=username)
