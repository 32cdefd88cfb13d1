"""Pydantic schemas for student data validation."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from components.core.config import get_settings

STUDENT_ID_MAX = 2**31 - 1


class StudentBase(BaseModel):
    """Base student schema."""
    name: str
    surname: str
    faculty: str = ""
    department: str = ""
    group: str = ""

    @field_validator("name", "surname")
    @classmethod
    def required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name and surname are required")
        return value

    @field_validator("faculty", "department", "group", mode="before")
    @classmethod
    def optional_text(cls, value: Optional[str]) -> str:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value


class StudentCreate(StudentBase):
    """Schema for student creation."""
    student_id: int = Field(gt=0, le=STUDENT_ID_MAX)

    @field_validator("student_id", mode="before")
    @classmethod
    def numeric_id(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value.isdigit():
                raise ValueError("Student ID must be a valid number")
        return value


class StudentUpdate(StudentCreate):
    """Schema for student update. The ID only selects the row to change."""


class Student(BaseModel):
    """Schema for student response."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    student_id: int
    name: str
    surname: str
    faculty: str = ""
    department: str = ""
    group: str = Field(default="", validation_alias=AliasChoices("group", "student_group"))

    @field_validator("faculty", "department", "group", mode="before")
    @classmethod
    def empty_if_null(cls, value: Optional[str]) -> str:
        return "" if value is None else value


class SearchQuery(BaseModel):
    """Schema for the search box. Too-short text means no filter."""
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, value: Optional[str]) -> str:
        return "" if value is None else value.strip()

    @property
    def is_filter(self) -> bool:
        return len(self.text) >= get_settings().SEARCH_MIN_LENGTH
