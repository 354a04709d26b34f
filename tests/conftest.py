# tests/conftest.py
# Pin runtime settings so the developer's PLX_* environment cannot leak into tests.

from __future__ import annotations

import pytest

from pathlex import config


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test with silent sanitization and no structured log output."""
    monkeypatch.setattr(config, "settings", config.Settings(debug=0, log_dir="", log_console=False))
    yield config.settings


@pytest.fixture
def strict_settings(monkeypatch):
    """Settings under which invalid characters raise instead of being stripped."""
    monkeypatch.setattr(config, "settings", config.Settings(debug=2, log_dir="", log_console=False))
    yield config.settings
