from __future__ import annotations

import logging
from typing import Mapping

from sqlalchemy.exc import IntegrityError

from src.application.errors import ConflictError, InfrastructureError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"
CHECK_VIOLATION = "23514"

# SQLSTATE -> (reason, default message)
_CLASSIFICATION = {
    UNIQUE_VIOLATION: ("duplicate_value", "A record with these values already exists"),
    FOREIGN_KEY_VIOLATION: ("invalid_reference", "Invalid reference to another record"),
    NOT_NULL_VIOLATION: ("missing_value", "A required field is missing"),
    CHECK_VIOLATION: ("invalid_value", "Invalid value for this field"),
}

# SQLite reports constraint failures only through the message text
_SQLITE_MARKERS = {
    "UNIQUE constraint failed": UNIQUE_VIOLATION,
    "FOREIGN KEY constraint failed": FOREIGN_KEY_VIOLATION,
    "NOT NULL constraint failed": NOT_NULL_VIOLATION,
    "CHECK constraint failed": CHECK_VIOLATION,
}


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = getattr(exc, "orig", None)
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    message = str(orig if orig is not None else exc)
    for marker, code in _SQLITE_MARKERS.items():
        if marker in message:
            return code
    return None


def translate_integrity_error(
    exc: IntegrityError,
    *,
    resource: str,
    messages: Mapping[str, str] | None = None,
) -> Exception:
    """Map a storage constraint violation onto a client-facing error.

    `messages` overrides the default text per reason (e.g. ``duplicate_value``).
    The caller raises the returned exception from the original one.
    """
    code = _sqlstate(exc)
    if code in _CLASSIFICATION:
        reason, default_message = _CLASSIFICATION[code]
        message = (messages or {}).get(reason, default_message)
        return ConflictError(message, details={"reason": reason, "resource": resource})
    logger.error("Unexpected database error on %s: %s", resource, exc, exc_info=exc)
    return InfrastructureError("Unexpected error, check the server logs")
