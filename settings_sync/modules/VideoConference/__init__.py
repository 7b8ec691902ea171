"""Video Conference module settings."""

from .constants import MODULE_NAME
from .engine import CommitResult, VideoConferenceSettingsEngine
from .settings import VideoConferenceProperties, VideoConferenceSettings
from .state import SettingsState, UNSET_INDEX

__all__ = [
    "CommitResult",
    "MODULE_NAME",
    "SettingsState",
    "UNSET_INDEX",
    "VideoConferenceProperties",
    "VideoConferenceSettings",
    "VideoConferenceSettingsEngine",
]
