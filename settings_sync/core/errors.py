"""Exception types raised by settings stores and collaborators."""

from __future__ import annotations

from typing import Optional


class SettingsSyncError(Exception):
    """Base class for every error raised inside settings_sync."""


class SettingsReadError(SettingsSyncError):
    """A persisted settings blob is missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Cannot read settings at '{path}': {reason}")
        self.path = path
        self.reason = reason
        self.__cause__ = cause


class SettingsWriteError(SettingsSyncError):
    """Persisting a settings blob failed."""

    def __init__(self, path: str, reason: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Cannot write settings at '{path}': {reason}")
        self.path = path
        self.reason = reason
        self.__cause__ = cause


class PickerError(SettingsSyncError):
    """The external file picker failed to produce a result."""


__all__ = [
    "PickerError",
    "SettingsReadError",
    "SettingsSyncError",
    "SettingsWriteError",
]
