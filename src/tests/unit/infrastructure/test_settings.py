"""Unit tests for infrastructure settings."""

import logging

import pytest
from pydantic import ValidationError

from ddd_base.infrastructure.settings import LoggingSettings, get_logging_settings


class TestLoggingSettings:
    """Tests for logging configuration."""

    def test_defaults(self, monkeypatch):
        """Should default to INFO with terminal detection."""
        monkeypatch.delenv("DDD_BASE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("DDD_BASE_LOG_JSON_OUTPUT", raising=False)

        settings = LoggingSettings(_env_file=None)

        assert settings.level == "INFO"
        assert settings.json_output is False
        assert settings.level_number == logging.INFO

    def test_level_is_normalized(self):
        """Level names are case-insensitive."""
        settings = LoggingSettings(level=" debug ")

        assert settings.level == "DEBUG"
        assert settings.level_number == logging.DEBUG

    def test_unknown_level_is_rejected(self):
        """Unknown level names fail validation."""
        with pytest.raises(ValidationError) as exc_info:
            LoggingSettings(level="chatty")

        assert "Unknown log level" in str(exc_info.value)

    def test_reads_environment(self, monkeypatch):
        """Settings come from DDD_BASE_LOG_* variables."""
        monkeypatch.setenv("DDD_BASE_LOG_LEVEL", "warning")
        monkeypatch.setenv("DDD_BASE_LOG_JSON_OUTPUT", "true")

        settings = LoggingSettings()

        assert settings.level == "WARNING"
        assert settings.json_output is True


class TestGetLoggingSettings:
    """Tests for the cached accessor."""

    def test_is_cached(self):
        """Repeated calls return the same instance."""
        get_logging_settings.cache_clear()

        assert get_logging_settings() is get_logging_settings()

        get_logging_settings.cache_clear()
