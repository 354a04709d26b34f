"""pathlex centralized configuration for runtime settings.

All settings are backed by environment variables following the PLX_* naming
convention. No side effects on import beyond reading the environment.

Example:
    >>> from pathlex.config import settings
    >>> settings.debug
    0

Environment Variables:
    PLX_DEBUG: Sanitizer debug level; 0 strips silently, 1 warns, 2+ raises (default: 0)
    PLX_LOG_DIR: Directory for structured JSONL logs written by the CLI (default: unset)
    PLX_LOG_CONSOLE: Echo structured log entries to stdout (default: off)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str) -> str:
    """Get environment variable with PLX_* prefix validation."""
    if not name.startswith("PLX_"):
        raise ValueError(f"Only PLX_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Get environment variable as integer."""
    raw = _env(name, str(default))
    try:
        return int(raw)
    except Exception:
        return default


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for pathlex.

    This dataclass is frozen to prevent accidental mutation at runtime.
    For testing, set environment variables and reload this module,
    or use monkeypatch to replace the module-level `settings` instance.
    """

    debug: int = _env_int("PLX_DEBUG", 0)
    log_dir: str = _env("PLX_LOG_DIR", "")
    log_console: bool = _env_bool("PLX_LOG_CONSOLE", False)


# Module-level instance for convenient access
settings = Settings()

__all__ = ["settings", "Settings"]
