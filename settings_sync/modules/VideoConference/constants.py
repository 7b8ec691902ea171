"""Video Conference module constants."""

from settings_sync.modules.base.hotkey import Hotkey
from settings_sync.modules.base.option_codec import (
    TOOLBAR_MONITORS,
    TOOLBAR_POSITIONS,
    ToolbarMonitor,
    ToolbarPosition,
)

MODULE_NAME = "Video Conference"
SETTINGS_VERSION = "1.0"

VK_A = 0x41
VK_O = 0x4F
VK_Q = 0x51

DEFAULT_CAMERA_AND_MICROPHONE_HOTKEY = Hotkey.of(VK_Q, win=True, shift=True)
DEFAULT_MICROPHONE_HOTKEY = Hotkey.of(VK_A, win=True, shift=True)
DEFAULT_CAMERA_HOTKEY = Hotkey.of(VK_O, win=True, shift=True)

DEFAULT_TOOLBAR_POSITION = TOOLBAR_POSITIONS.encode(ToolbarPosition.TOP_RIGHT)
DEFAULT_TOOLBAR_MONITOR = TOOLBAR_MONITORS.encode(ToolbarMonitor.MAIN_MONITOR)
DEFAULT_HIDE_TOOLBAR_WHEN_UNMUTED = True

# Persisted property keys
KEY_CAMERA_AND_MICROPHONE_HOTKEY = "mute_camera_and_microphone_hotkey"
KEY_MICROPHONE_HOTKEY = "mute_microphone_hotkey"
KEY_CAMERA_HOTKEY = "mute_camera_hotkey"
KEY_SELECTED_CAMERA = "selected_camera"
KEY_SELECTED_MICROPHONE = "selected_mic"
KEY_TOOLBAR_POSITION = "toolbar_position"
KEY_TOOLBAR_MONITOR = "toolbar_monitor"
KEY_OVERLAY_IMAGE_PATH = "camera_overlay_image_path"
KEY_HIDE_TOOLBAR_WHEN_UNMUTED = "hide_toolbar_when_unmuted"
