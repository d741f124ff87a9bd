"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.options import SearchOptions

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "console")


class Settings(BaseSettings):
    """Settings with environment variable support (``HAYSTACK_`` prefix)."""

    # Application
    app_name: str = Field(default="fuzzy-haystack")

    # Search defaults
    case_sensitive: bool = Field(default=False)
    flexibility: int = Field(default=2, ge=0)
    stemming: bool = Field(default=False)
    exclusions: List[str] = Field(default_factory=list)  # literal substrings
    ignore_stop_words: bool = Field(default=False)
    default_limit: int = Field(default=1, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = SettingsConfigDict(
        env_prefix="HAYSTACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate the log output format."""
        if v.lower() not in LOG_FORMATS:
            raise ValueError("log_format must be 'json' or 'console'")
        return v.lower()

    def search_options(self) -> SearchOptions:
        """Build search options from these settings."""
        return SearchOptions(
            case_sensitive=self.case_sensitive,
            flexibility=self.flexibility,
            stemming=self.stemming,
            exclusions=self.exclusions or None,
            ignore_stop_words=self.ignore_stop_words
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
