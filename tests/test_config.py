from __future__ import annotations

import importlib

import pytest

from pathlex import config as config_module


@pytest.fixture
def reload_config(monkeypatch):
    """Reload pathlex.config after env changes, restoring the pristine module afterwards."""

    def _reload():
        return importlib.reload(config_module)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config_module)


def test_defaults(monkeypatch, reload_config):
    monkeypatch.delenv("PLX_DEBUG", raising=False)
    monkeypatch.delenv("PLX_LOG_DIR", raising=False)
    monkeypatch.delenv("PLX_LOG_CONSOLE", raising=False)
    mod = reload_config()
    assert mod.settings.debug == 0
    assert mod.settings.log_dir == ""
    assert mod.settings.log_console is False


def test_env_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("PLX_DEBUG", "2")
    monkeypatch.setenv("PLX_LOG_DIR", "/tmp/plx-logs")
    monkeypatch.setenv("PLX_LOG_CONSOLE", "yes")
    mod = reload_config()
    assert mod.settings.debug == 2
    assert mod.settings.log_dir == "/tmp/plx-logs"
    assert mod.settings.log_console is True


def test_bad_int_falls_back_to_default(monkeypatch, reload_config):
    monkeypatch.setenv("PLX_DEBUG", "loud")
    mod = reload_config()
    assert mod.settings.debug == 0


def test_only_plx_prefix_allowed():
    with pytest.raises(ValueError, match="Only PLX_"):
        config_module._env("HOME", "")


def test_settings_are_frozen():
    with pytest.raises(Exception):
        config_module.settings.debug = 3  # type: ignore[misc]
