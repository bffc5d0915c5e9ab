"""Ambient infrastructure: logging configuration, settings and version.

Applications call `configure_logging()` once at startup so that the
restoration and repository probes emit through the configured structlog
pipeline.
"""

from ddd_base.infrastructure.logging import configure_logging
from ddd_base.infrastructure.settings import LoggingSettings, get_logging_settings

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logging_settings",
]
