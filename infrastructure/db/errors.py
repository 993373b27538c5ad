"""
Translation of storage client failures into journal errors.
"""
import logging
from typing import Optional

from application.errors import ConflictError, JournalError, StorageError

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation, surfaced by PostgREST as ``code``.
UNIQUE_VIOLATION = "23505"


def storage_failure(
    operation: str,
    exc: Exception,
    *,
    conflict_message: Optional[str] = None,
) -> JournalError:
    """
    Build the error to raise for a failed storage call.

    Unique constraint violations become ConflictError; everything else is a
    StorageError whose developer message keeps the driver's description.
    """
    code = getattr(exc, "code", None)
    if code == UNIQUE_VIOLATION:
        logger.warning("Unique constraint violated during %s: %s", operation, exc)
        return ConflictError(
            conflict_message,
            developer_message=str(exc),
        )

    logger.error("Storage failure during %s: %s", operation, exc)
    return StorageError(developer_message=f"{operation} failed: {exc}")
