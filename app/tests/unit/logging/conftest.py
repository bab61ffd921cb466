"""Fixtures for y10n.logging tests."""

import pytest
from unittest.mock import Mock

from y10n.configuration import Settings


@pytest.fixture
def mock_settings(monkeypatch):
    """Patch the settings object used by the logging setup."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    monkeypatch.setattr("y10n.logging.setup.settings", settings)
    return settings
