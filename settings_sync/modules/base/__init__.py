from .devices import ALL_MICROPHONES, DeviceNameProvider, StaticDeviceProvider
from .file_picker import CallbackFilePicker, FilePicker
from .hotkey import Hotkey
from .option_codec import TOOLBAR_MONITORS, TOOLBAR_POSITIONS, OptionCodec, ToolbarMonitor, ToolbarPosition

__all__ = [
    "ALL_MICROPHONES",
    "CallbackFilePicker",
    "DeviceNameProvider",
    "FilePicker",
    "Hotkey",
    "OptionCodec",
    "StaticDeviceProvider",
    "TOOLBAR_MONITORS",
    "TOOLBAR_POSITIONS",
    "ToolbarMonitor",
    "ToolbarPosition",
]
