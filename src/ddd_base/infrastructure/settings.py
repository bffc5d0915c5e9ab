"""Library settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging settings.

    Environment variables:
        DDD_BASE_LOG_LEVEL: Minimum log level name (default: INFO)
        DDD_BASE_LOG_JSON_OUTPUT: Always render JSON, even on a TTY (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="DDD_BASE_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Minimum log level name")
    json_output: bool = Field(
        default=False,
        description="Render JSON regardless of terminal detection",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        normalized = v.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return normalized

    @property
    def level_number(self) -> int:
        """Numeric level for structlog's filtering logger."""
        return logging.getLevelNamesMapping()[self.level]


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return LoggingSettings()
