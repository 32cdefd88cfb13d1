from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database settings
    DB_URL: Optional[str] = None  # Optional full DB URL
    DB_PATH: str = "courses.db"
    DB_ECHO: bool = False

    # Input policy applied by callers before they reach the stores
    USERNAME_MIN_LENGTH: int = 3
    PASSWORD_MIN_LENGTH: int = 4
    SEARCH_MIN_LENGTH: int = 1

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        validate_default = True

    @property
    def db_url(self) -> str:
        """Get database URL, falling back to the SQLite file path."""
        if self.DB_URL:
            return self.DB_URL
        return f"sqlite:///{self.DB_PATH}"


@lru_cache()
def get_settings() -> Settings:
    """
    Returns cached Settings instance to avoid reloading .env file on every access
    """
    return Settings()
