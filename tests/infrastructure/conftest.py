"""Shared fixtures for the console and configuration tests."""

from __future__ import annotations

import pytest

from ims.infrastructure import config
from ims.infrastructure.cli import main


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and keep the CLI from reconfiguring logging."""
    for name in ("IMS_LOG_LEVEL", "IMS_LOW_STOCK_THRESHOLD", "IMS_MAX_INPUT_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
