"""
Process-wide general settings shared by every module.

The aggregate is created once by the host and injected into each module's
settings engine. Module enablement changes go through
``GeneralSettingsRepository.set_module_enabled`` which persists the
aggregate and pushes a ``{"general": ...}`` snapshot to the control
process, independent of any module's own settings file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from settings_sync.core.commands import SettingsMessage
from settings_sync.core.errors import SettingsReadError, SettingsWriteError
from settings_sync.core.logging_utils import get_module_logger
from settings_sync.core.notification_channel import NotificationChannel
from settings_sync.core.settings_store import SettingsStoreProtocol

GENERAL_SETTINGS_PATH = ""

_THEMES = {"system", "light", "dark"}


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return default


@dataclass(slots=True)
class GeneralSettings:
    enabled: Dict[str, bool] = field(default_factory=dict)
    is_elevated: bool = False
    run_elevated: bool = False
    startup: bool = False
    theme: str = "system"

    def is_module_enabled(self, module_name: str, default: bool = True) -> bool:
        return self.enabled.get(module_name, default)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GeneralSettings":
        raw_enabled = payload.get("enabled", {})
        if not isinstance(raw_enabled, dict):
            raw_enabled = {}
        enabled = {str(name): _coerce_bool(value, True) for name, value in raw_enabled.items()}
        theme = str(payload.get("theme", "system") or "system").strip().lower()
        if theme not in _THEMES:
            theme = "system"
        return cls(
            enabled=enabled,
            is_elevated=_coerce_bool(payload.get("is_elevated", False), False),
            run_elevated=_coerce_bool(payload.get("run_elevated", False), False),
            startup=_coerce_bool(payload.get("startup", False), False),
            theme=theme,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": dict(self.enabled),
            "is_elevated": self.is_elevated,
            "run_elevated": self.run_elevated,
            "startup": self.startup,
            "theme": self.theme,
        }


class GeneralSettingsRepository:
    """Owns the shared GeneralSettings instance and its persistence path."""

    def __init__(
        self,
        store: SettingsStoreProtocol,
        channel: NotificationChannel,
        *,
        path: str = GENERAL_SETTINGS_PATH,
        settings: Optional[GeneralSettings] = None,
    ) -> None:
        self.logger = get_module_logger("GeneralSettings")
        self._store = store
        self._channel = channel
        self._path = path
        self.settings = settings if settings is not None else self._load()

    def _load(self) -> GeneralSettings:
        try:
            return GeneralSettings.from_dict(self._store.get(self._path))
        except SettingsReadError as exc:
            self.logger.warning("Using default general settings: %s", exc)
            return GeneralSettings()

    def save(self) -> bool:
        try:
            self._store.save(self._path, self.settings.to_dict())
        except SettingsWriteError as exc:
            self.logger.error("Failed to persist general settings: %s", exc)
            return False
        return True

    def notify(self) -> Optional[int]:
        try:
            message = SettingsMessage.general_settings(self.settings.to_dict())
            return self._channel.send(message)
        except Exception as exc:
            self.logger.error("Failed to send general settings: %s", exc)
            return None

    def set_module_enabled(self, module_name: str, enabled: bool) -> bool:
        """Record the module's enablement, persist and notify.

        Returns False when the value was already current (nothing is sent).
        """
        if self.settings.enabled.get(module_name) == enabled:
            return False
        self.settings.enabled[module_name] = enabled
        self.logger.info("%s %s", module_name, "enabled" if enabled else "disabled")
        self.save()
        self.notify()
        return True


__all__ = ["GENERAL_SETTINGS_PATH", "GeneralSettings", "GeneralSettingsRepository"]
