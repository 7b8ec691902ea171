"""UI-facing view of the Video Conference settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from settings_sync.modules.base.hotkey import Hotkey

from . import constants as C

UNSET_INDEX = -1


@dataclass(slots=True)
class SettingsState:
    """Selector indices, hotkeys and flags derived from the persisted document."""

    enabled: bool = True
    selected_camera_index: int = UNSET_INDEX
    selected_microphone_index: int = 0
    camera_and_microphone_hotkey: Optional[Hotkey] = C.DEFAULT_CAMERA_AND_MICROPHONE_HOTKEY
    microphone_hotkey: Optional[Hotkey] = C.DEFAULT_MICROPHONE_HOTKEY
    camera_hotkey: Optional[Hotkey] = C.DEFAULT_CAMERA_HOTKEY
    overlay_image_path: str = ""
    toolbar_position_index: int = 0
    toolbar_monitor_index: int = 0
    hide_toolbar_when_unmuted: bool = C.DEFAULT_HIDE_TOOLBAR_WHEN_UNMUTED

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in ("camera_and_microphone_hotkey", "microphone_hotkey", "camera_hotkey"):
            hotkey = getattr(self, key)
            data[key] = str(hotkey) if hotkey is not None else None
        return data


__all__ = ["SettingsState", "UNSET_INDEX"]
