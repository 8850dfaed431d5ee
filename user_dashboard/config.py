"""
Configuration settings for the User Dashboard.

Uses Pydantic Settings to load environment variables for the remote user
source, the persisted session file, listing defaults, and logging.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Remote source
    api_url: str = Field("https://jsonplaceholder.typicode.com/users", alias="API_URL")
    request_timeout_seconds: float = Field(10.0, alias="REQUEST_TIMEOUT_SECONDS")

    # Session
    session_file: Path = Field(
        Path.home() / ".user_dashboard" / "session.json", alias="SESSION_FILE"
    )

    # Listing defaults
    page_size_options: List[int] = Field([5, 10, 15], alias="PAGE_SIZE_OPTIONS")
    default_sort_field: str = Field("name", alias="DEFAULT_SORT_FIELD")

    # Placeholder credentials
    demo_email: str = Field("test@gmail.com", alias="DEMO_EMAIL")
    demo_password: str = Field("pass123", alias="DEMO_PASSWORD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("page_size_options")
    @classmethod
    def _check_page_sizes(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("page_size_options must not be empty")
        if any(size <= 0 for size in value):
            raise ValueError("page_size_options must contain positive sizes only")
        return value

    @property
    def default_page_size(self) -> int:
        """First entry of the allowed page sizes."""
        return self.page_size_options[0]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
