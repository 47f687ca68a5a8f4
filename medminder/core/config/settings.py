"""
Application settings module.

This module provides configuration settings for the tracking engine, including
time zone handling, adherence thresholds, persistence and logging values.
"""

# Standard Library Imports
import logging
import os
from datetime import tzinfo as TzInfo
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Third-Party Imports
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local Imports
from medminder.core.utils.date_utils import resolve_timezone

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # Environment
    TESTING: bool = False  # Flag to indicate when running in test environment
    ENVIRONMENT: str = "development"  # development, staging, production, test

    # Wall-clock settings
    TIMEZONE: str = "Europe/Warsaw"  # IANA zone used for "today" and dose instants

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./medminder.db"
    DB_ECHO_LOG: bool = False  # Whether to echo SQL queries in logs

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Dose tracking
    MISSED_DOSE_GRACE_MINUTES: int = Field(default=120, ge=0)
    WEEK_LENGTH_DAYS: int = Field(default=7, ge=1)
    QUANTITY_SYNC_MAX_ATTEMPTS: int = Field(default=3, ge=1)
    QUANTITY_SYNC_RETRY_DELAY_SECONDS: float = Field(default=0.5, ge=0)
    REPOSITORY_TIMEOUT_SECONDS: float | None = None  # None keeps repository calls unbounded

    # Caregiver alerts
    CAREGIVER_OVERDUE_ALERT_MINUTES: int = Field(default=30, ge=0)
    LOW_STOCK_THRESHOLD: int = Field(default=5, ge=0)
    EXPIRY_WARNING_DAYS: int = Field(default=30, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the time zone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @model_validator(mode="after")
    def ensure_async_database_url(self) -> Self:
        """Ensure DATABASE_URL uses the async SQLite driver when SQLite is configured."""
        db_url = self.DATABASE_URL
        if db_url.startswith("sqlite:///") and "aiosqlite" not in db_url:
            self.DATABASE_URL = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")
            logger.info(f"Set DATABASE_URL to {self.DATABASE_URL} based on sqlite URL")
        return self

    @property
    def tzinfo(self) -> TzInfo:
        """The configured wall-clock time zone."""
        return resolve_timezone(self.TIMEZONE)


# Create a global settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    Services accept a ``Settings`` instance so tests can inject their own;
    this function is the default used when none is given.

    Returns:
        The application settings instance
    """
    if os.environ.get("ENVIRONMENT") == "test" or os.environ.get("PYTEST_CURRENT_TEST"):
        settings.TESTING = True
    return settings
