"""Pydantic schemas for user data validation."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from components.core.config import get_settings


class UserLogin(BaseModel):
    """Schema for the login form."""
    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username and password are required")
        return value


class UserCreate(UserLogin):
    """Schema for the registration form."""
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def strip_confirmation(cls, value: str) -> str:
        return value.strip()

    @field_validator("username")
    @classmethod
    def username_length(cls, value: str) -> str:
        value = value.strip()
        min_length = get_settings().USERNAME_MIN_LENGTH
        if len(value) < min_length:
            raise ValueError(f"Username must be at least {min_length} characters long")
        return value

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        value = value.strip()
        min_length = get_settings().PASSWORD_MIN_LENGTH
        if len(value) < min_length:
            raise ValueError(f"Password must be at least {min_length} characters long")
        return value

    @model_validator(mode="after")
    def passwords_match(self) -> "UserCreate":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class User(BaseModel):
    """Schema for user response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
