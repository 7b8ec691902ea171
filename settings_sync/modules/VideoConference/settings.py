"""Persisted settings document of the Video Conference module.

On disk every property is wrapped as ``{"value": ...}``::

    {"name": "Video Conference", "version": "1.0",
     "properties": {"selected_camera": {"value": "USB Camera"}, ...}}

Missing properties fall back to defaults. Properties of the wrong JSON
type make the whole document unreadable (SettingsReadError), which the
engine answers by resetting the module to defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

from settings_sync.core.errors import SettingsReadError
from settings_sync.modules.base.hotkey import Hotkey

from . import constants as C


@dataclass(slots=True)
class VideoConferenceProperties:
    mute_camera_and_microphone_hotkey: Optional[Hotkey] = C.DEFAULT_CAMERA_AND_MICROPHONE_HOTKEY
    mute_microphone_hotkey: Optional[Hotkey] = C.DEFAULT_MICROPHONE_HOTKEY
    mute_camera_hotkey: Optional[Hotkey] = C.DEFAULT_CAMERA_HOTKEY
    selected_camera: str = ""
    selected_mic: str = ""
    toolbar_position: str = C.DEFAULT_TOOLBAR_POSITION
    toolbar_monitor: str = C.DEFAULT_TOOLBAR_MONITOR
    camera_overlay_image_path: str = ""
    hide_toolbar_when_unmuted: bool = C.DEFAULT_HIDE_TOOLBAR_WHEN_UNMUTED


_HOTKEY_KEYS = (
    C.KEY_CAMERA_AND_MICROPHONE_HOTKEY,
    C.KEY_MICROPHONE_HOTKEY,
    C.KEY_CAMERA_HOTKEY,
)
_STRING_KEYS = (
    C.KEY_SELECTED_CAMERA,
    C.KEY_SELECTED_MICROPHONE,
    C.KEY_TOOLBAR_POSITION,
    C.KEY_TOOLBAR_MONITOR,
    C.KEY_OVERLAY_IMAGE_PATH,
)
_BOOL_KEYS = (C.KEY_HIDE_TOOLBAR_WHEN_UNMUTED,)


def _read_string(path: str, key: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SettingsReadError(path, f"'{key}' must be a string")
    return value


def _read_bool(path: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise SettingsReadError(path, f"'{key}' must be a boolean")
    return value


def _read_hotkey(path: str, key: str, value: Any) -> Optional[Hotkey]:
    if value is None:
        return None
    hotkey = Hotkey.from_dict(value)
    if hotkey is None:
        raise SettingsReadError(path, f"'{key}' is not a hotkey object")
    return hotkey


_READERS: Dict[str, Callable[[str, str, Any], Any]] = {
    **{key: _read_hotkey for key in _HOTKEY_KEYS},
    **{key: _read_string for key in _STRING_KEYS},
    **{key: _read_bool for key in _BOOL_KEYS},
}


@dataclass(slots=True)
class VideoConferenceSettings:
    name: str = C.MODULE_NAME
    version: str = C.SETTINGS_VERSION
    properties: VideoConferenceProperties = field(default_factory=VideoConferenceProperties)

    @classmethod
    def from_dict(cls, payload: Any, *, path: str = C.MODULE_NAME) -> "VideoConferenceSettings":
        if not isinstance(payload, dict):
            raise SettingsReadError(path, "settings document is not an object")
        raw_properties = payload.get("properties", {})
        if not isinstance(raw_properties, dict):
            raise SettingsReadError(path, "'properties' is not an object")

        values: Dict[str, Any] = {}
        for key, reader in _READERS.items():
            if key not in raw_properties:
                continue
            wrapper = raw_properties[key]
            if not isinstance(wrapper, dict) or "value" not in wrapper:
                raise SettingsReadError(path, f"'{key}' is not a {{\"value\": ...}} object")
            values[key] = reader(path, key, wrapper["value"])

        return cls(
            name=str(payload.get("name") or C.MODULE_NAME),
            version=str(payload.get("version") or C.SETTINGS_VERSION),
            properties=VideoConferenceProperties(**values),
        )

    def to_dict(self) -> Dict[str, Any]:
        props = self.properties
        hotkeys = {
            C.KEY_CAMERA_AND_MICROPHONE_HOTKEY: props.mute_camera_and_microphone_hotkey,
            C.KEY_MICROPHONE_HOTKEY: props.mute_microphone_hotkey,
            C.KEY_CAMERA_HOTKEY: props.mute_camera_hotkey,
        }
        properties: Dict[str, Any] = {
            key: {"value": hotkey.to_dict() if hotkey is not None else None}
            for key, hotkey in hotkeys.items()
        }
        properties.update({
            C.KEY_SELECTED_CAMERA: {"value": props.selected_camera},
            C.KEY_SELECTED_MICROPHONE: {"value": props.selected_mic},
            C.KEY_TOOLBAR_POSITION: {"value": props.toolbar_position},
            C.KEY_TOOLBAR_MONITOR: {"value": props.toolbar_monitor},
            C.KEY_OVERLAY_IMAGE_PATH: {"value": props.camera_overlay_image_path},
            C.KEY_HIDE_TOOLBAR_WHEN_UNMUTED: {"value": props.hide_toolbar_when_unmuted},
        })
        return {"name": self.name, "version": self.version, "properties": properties}

    def copy(self) -> "VideoConferenceSettings":
        return replace(self, properties=replace(self.properties))


__all__ = ["VideoConferenceProperties", "VideoConferenceSettings"]
