"""Core services shared by module settings engines."""

from .errors import PickerError, SettingsReadError, SettingsSyncError, SettingsWriteError
from .general_settings import GeneralSettings, GeneralSettingsRepository
from .notification_channel import NotificationChannel, StreamNotificationChannel
from .settings_store import SettingsStore

__all__ = [
    "GeneralSettings",
    "GeneralSettingsRepository",
    "NotificationChannel",
    "PickerError",
    "SettingsReadError",
    "SettingsStore",
    "SettingsSyncError",
    "SettingsWriteError",
    "StreamNotificationChannel",
]
