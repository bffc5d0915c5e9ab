"""Unit tests for structlog configuration."""

import io
import json
import logging

import pytest
import structlog

import ddd_base
from ddd_base.domain.observability import DefaultRestorationProbe
from ddd_base.infrastructure import logging as ddd_logging
from ddd_base.infrastructure.logging import configure_logging
from ddd_base.infrastructure.settings import LoggingSettings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def no_tty(monkeypatch):
    """Make stdout look like a pipe."""
    stream = io.StringIO()
    monkeypatch.setattr(ddd_logging.sys, "stdout", stream)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    return stream


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_uses_json_renderer_without_tty(self, no_tty):
        """Production output is JSON."""
        configure_logging(LoggingSettings(level="INFO"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_uses_console_renderer_when_forced(self, no_tty, monkeypatch):
        """FORCE_COLOR enables the colored console renderer."""
        monkeypatch.setenv("FORCE_COLOR", "1")

        configure_logging(LoggingSettings(level="INFO"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_output_overrides_color(self, no_tty, monkeypatch):
        """json_output wins over FORCE_COLOR."""
        monkeypatch.setenv("FORCE_COLOR", "1")

        configure_logging(LoggingSettings(level="INFO", json_output=True))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_applies_level_threshold(self, no_tty):
        """The wrapper class filters below the configured level."""
        configure_logging(LoggingSettings(level="WARNING"))

        wrapper_class = structlog.get_config()["wrapper_class"]
        assert wrapper_class is structlog.make_filtering_bound_logger(logging.WARNING)

    def test_loads_settings_when_omitted(self, no_tty, monkeypatch):
        """Without explicit settings, the cached environment settings are used."""
        monkeypatch.setattr(
            ddd_logging,
            "get_logging_settings",
            lambda: LoggingSettings(level="ERROR"),
        )

        configure_logging()

        wrapper_class = structlog.get_config()["wrapper_class"]
        assert wrapper_class is structlog.make_filtering_bound_logger(logging.ERROR)


class TestPackageEntryPoint:
    """configure_logging as exposed to applications."""

    def test_exported_from_package(self):
        """The package root re-exports the configuration entry point."""
        assert ddd_base.configure_logging is configure_logging

    def test_probe_events_use_configured_pipeline(self, no_tty):
        """Restoration events are rendered through the configured JSON pipeline."""
        ddd_base.configure_logging(LoggingSettings(level="INFO"))

        DefaultRestorationProbe().restoration_rejected(
            entity_type="Product", reason="missing_id"
        )

        record = json.loads(no_tty.getvalue().strip().splitlines()[-1])
        assert record["event"] == "entity_restoration_rejected"
        assert record["level"] == "warning"
        assert record["entity_type"] == "Product"
