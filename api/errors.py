"""
Error envelope: maps failures to HTTP status codes and a uniform JSON body.

Every error response has the shape::

    {"message": "...", "developer_message": "..."}

``message`` is safe to show to clients. Unexpected exceptions always answer
500 with a generic message; their text only goes to ``developer_message``.
"""

import logging
from typing import Dict, Optional, Tuple, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.errors import (
    BadRequestError,
    ConflictError,
    JournalError,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal system error"

# Checked in order, so subclasses must come before their bases.
STATUS_BY_ERROR: Tuple[Tuple[Type[JournalError], int], ...] = (
    (BadRequestError, 400),
    (UnauthorizedError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
)


class ErrorEnvelope(BaseModel):
    """Body of every error response."""

    message: str
    developer_message: str = ""


def status_for(exc: JournalError) -> int:
    """HTTP status for a journal failure; unknown kinds are 500."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


def error_response(
    status_code: int,
    message: str,
    developer_message: str = "",
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Render the error envelope."""
    envelope = ErrorEnvelope(message=message, developer_message=developer_message)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(),
        headers=headers,
    )


async def journal_error_handler(request: Request, exc: JournalError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.developer_message,
            exc_info=exc,
        )
    else:
        logger.warning(
            "%s %s -> %d: %s", request.method, request.url.path, status_code, exc.message
        )

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return error_response(status_code, exc.message, exc.developer_message, headers=headers)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, details)
    return error_response(400, "Invalid request data", details)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR_MESSAGE, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on ``app``."""
    app.add_exception_handler(JournalError, journal_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
