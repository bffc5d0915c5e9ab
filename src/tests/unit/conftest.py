"""Unit test fixtures."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_logger():
    """Provide a mock structlog logger for probe tests."""
    return Mock()


@pytest.fixture
def mock_restoration_probe():
    """Provide a mock restoration probe."""
    return Mock()
