"""Centralized path constants for settings storage."""

from __future__ import annotations

import os
from pathlib import Path

# User-specific state (allows running from read-only install directories)
STATE_DIR_ENV = "SETTINGS_SYNC_STATE_DIR"
SETTINGS_FILE_NAME = "settings.json"


def user_state_dir() -> Path:
    """Return the per-user state directory, honouring the override env var."""
    override = os.environ.get(STATE_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".settings_sync"


def default_settings_root() -> Path:
    return user_state_dir() / "settings"


__all__ = [
    "SETTINGS_FILE_NAME",
    "STATE_DIR_ENV",
    "default_settings_root",
    "user_state_dir",
]
