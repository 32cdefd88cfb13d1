"""Error taxonomy shared by the stores."""

from enum import Enum

from sqlalchemy.exc import IntegrityError


class ErrorCode(str, Enum):
    """Expected, recoverable outcomes returned by store operations."""
    DUPLICATE_USERNAME = "duplicate_username"
    DUPLICATE_STUDENT_ID = "duplicate_student_id"
    NOT_FOUND = "not_found"


class StorageError(Exception):
    """Failure of the underlying storage engine (IO, locking, schema, constraints)."""


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a uniqueness violation apart from other integrity failures."""
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate" in message
