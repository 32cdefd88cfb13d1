"""Core schemas for the application."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from components.core.errors import ErrorCode

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Outcome of a store operation: a value or a domain error code."""
    value: Optional[T] = None
    error: Optional[ErrorCode] = None
    student_id: Optional[int] = None  # Offending id for DUPLICATE_STUDENT_ID

    @property
    def ok(self) -> bool:
        return self.error is None
