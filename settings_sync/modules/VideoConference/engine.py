"""
Settings synchronization for the Video Conference module.

The engine loads the module's settings file, repairs it when unreadable,
reconciles the stored device names with the devices present now, and keeps
the store and the control process in step with every change:

    engine = VideoConferenceSettingsEngine(store, channel, general, devices)
    engine.set_selected_camera_index(1)    # saves settings.json, sends envelope
    await engine.select_overlay_image()    # only commits if a path was picked

Failures never propagate out of a mutator. Store write errors are logged
and reported through the returned CommitResult; the in-memory state stays
authoritative for the rest of the session.
"""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from settings_sync.core.commands import SettingsMessage
from settings_sync.core.errors import SettingsSyncError, SettingsWriteError
from settings_sync.core.general_settings import GeneralSettingsRepository
from settings_sync.core.logging_utils import LoggerLike, ensure_structured_logger
from settings_sync.core.notification_channel import NotificationChannel
from settings_sync.core.settings_store import SettingsStoreProtocol, join_settings_path
from settings_sync.modules.base.devices import DeviceNameProvider, camera_names, microphone_names
from settings_sync.modules.base.file_picker import FilePicker
from settings_sync.modules.base.hotkey import Hotkey
from settings_sync.modules.base.option_codec import TOOLBAR_MONITORS, TOOLBAR_POSITIONS

from . import constants as C
from .settings import VideoConferenceSettings
from .state import UNSET_INDEX, SettingsState


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Outcome of one persist + notify step.

    ``notify_status`` is the channel's return code, or None when the send
    raised.
    """

    saved: bool
    notify_status: Optional[int]


def _find_index(names: Sequence[str], wanted: str) -> int:
    for index, name in enumerate(names):
        if name == wanted:
            return index
    return UNSET_INDEX


class VideoConferenceSettingsEngine:

    def __init__(
        self,
        store: SettingsStoreProtocol,
        channel: NotificationChannel,
        general: GeneralSettingsRepository,
        devices: DeviceNameProvider,
        picker: Optional[FilePicker] = None,
        *,
        config_subfolder: str = "",
        logger: LoggerLike = None,
    ) -> None:
        self.logger = ensure_structured_logger(logger, fallback_name="VideoConference")
        self._store = store
        self._channel = channel
        self._general = general
        self._picker = picker
        self._settings_path = join_settings_path(config_subfolder, C.MODULE_NAME)
        self._pick_pending = False

        self.cameras: Tuple[str, ...] = camera_names(devices)
        self.microphones: Tuple[str, ...] = microphone_names(devices)
        self.last_commit: Optional[CommitResult] = None

        self._settings = self._load_with_recovery()
        self.state = self._reconcile()

    # ------------------------------------------------------------------
    # Loading

    @property
    def settings_path(self) -> str:
        return self._settings_path

    @property
    def settings(self) -> VideoConferenceSettings:
        return self._settings.copy()

    @property
    def is_elevated(self) -> bool:
        return self._general.settings.is_elevated

    def _load_with_recovery(self) -> VideoConferenceSettings:
        try:
            payload = self._store.get(self._settings_path)
            return VideoConferenceSettings.from_dict(payload, path=self._settings_path)
        except (SettingsSyncError, OSError, ValueError, TypeError) as exc:
            self.logger.warning("Resetting %s settings to defaults: %s", C.MODULE_NAME, exc)
            settings = VideoConferenceSettings()
            self._save(settings.to_dict())
            return settings

    def _reconcile(self) -> SettingsState:
        props = self._settings.properties
        needs_save = False

        if not props.selected_camera and self.cameras:
            camera_index = 0
            props.selected_camera = self.cameras[0]
            needs_save = True
        else:
            camera_index = _find_index(self.cameras, props.selected_camera)
            if camera_index == UNSET_INDEX and props.selected_camera:
                self.logger.info("Camera '%s' is not connected", props.selected_camera)

        if not props.selected_mic:
            microphone_index = 0
            props.selected_mic = self.microphones[0]
            needs_save = True
        else:
            microphone_index = _find_index(self.microphones, props.selected_mic)
            if microphone_index == UNSET_INDEX:
                self.logger.info("Microphone '%s' is not connected", props.selected_mic)

        state = SettingsState(
            enabled=self._general.settings.is_module_enabled(C.MODULE_NAME),
            selected_camera_index=camera_index,
            selected_microphone_index=microphone_index,
            camera_and_microphone_hotkey=props.mute_camera_and_microphone_hotkey,
            microphone_hotkey=props.mute_microphone_hotkey,
            camera_hotkey=props.mute_camera_hotkey,
            overlay_image_path=props.camera_overlay_image_path,
            hide_toolbar_when_unmuted=props.hide_toolbar_when_unmuted,
        )

        position = TOOLBAR_POSITIONS.decode(props.toolbar_position)
        if position is not None:
            state.toolbar_position_index = int(position)
        else:
            self.logger.debug("Unknown toolbar position '%s'", props.toolbar_position)

        monitor = TOOLBAR_MONITORS.decode(props.toolbar_monitor)
        if monitor is not None:
            state.toolbar_monitor_index = int(monitor)
        else:
            self.logger.debug("Unknown toolbar monitor '%s'", props.toolbar_monitor)

        if needs_save:
            self._save(self._settings.to_dict())
        return state

    # ------------------------------------------------------------------
    # Commit

    def _save(self, document: Dict[str, Any]) -> bool:
        try:
            self._store.save(self._settings_path, document)
        except (SettingsWriteError, OSError) as exc:
            self.logger.error("Failed to persist %s settings: %s", C.MODULE_NAME, exc)
            return False
        return True

    def _notify(self, document: Dict[str, Any]) -> Optional[int]:
        try:
            message = SettingsMessage.module_settings(C.MODULE_NAME, document)
            return self._channel.send(message)
        except Exception as exc:
            self.logger.error("Failed to send %s settings: %s", C.MODULE_NAME, exc)
            return None

    def commit(self) -> CommitResult:
        """Persist the whole document and push it to the control process.

        The send is attempted even when the save failed; nothing is rolled
        back.
        """
        document = self._settings.to_dict()
        result = CommitResult(saved=self._save(document), notify_status=self._notify(document))
        self.last_commit = result
        return result

    # ------------------------------------------------------------------
    # Mutators

    def set_enabled(self, enabled: bool) -> bool:
        enabled = bool(enabled)
        if enabled == self.state.enabled:
            return False
        self.state.enabled = enabled
        self._general.set_module_enabled(C.MODULE_NAME, enabled)
        return True

    def set_selected_camera_index(self, index: int) -> bool:
        if index == self.state.selected_camera_index:
            return False
        if not 0 <= index < len(self.cameras):
            self.logger.debug("Ignoring camera index %d (%d cameras)", index, len(self.cameras))
            return False
        self.state.selected_camera_index = index
        self._settings.properties.selected_camera = self.cameras[index]
        self.commit()
        return True

    def set_selected_microphone_index(self, index: int) -> bool:
        if index == self.state.selected_microphone_index:
            return False
        if not 0 <= index < len(self.microphones):
            self.logger.debug("Ignoring microphone index %d (%d entries)", index, len(self.microphones))
            return False
        self.state.selected_microphone_index = index
        self._settings.properties.selected_mic = self.microphones[index]
        self.commit()
        return True

    def set_camera_and_microphone_hotkey(self, hotkey: Optional[Hotkey]) -> bool:
        if hotkey == self.state.camera_and_microphone_hotkey:
            return False
        self.state.camera_and_microphone_hotkey = hotkey
        self._settings.properties.mute_camera_and_microphone_hotkey = hotkey
        self.commit()
        return True

    def set_microphone_hotkey(self, hotkey: Optional[Hotkey]) -> bool:
        if hotkey == self.state.microphone_hotkey:
            return False
        self.state.microphone_hotkey = hotkey
        self._settings.properties.mute_microphone_hotkey = hotkey
        self.commit()
        return True

    def set_camera_hotkey(self, hotkey: Optional[Hotkey]) -> bool:
        if hotkey == self.state.camera_hotkey:
            return False
        self.state.camera_hotkey = hotkey
        self._settings.properties.mute_camera_hotkey = hotkey
        self.commit()
        return True

    def set_toolbar_position_index(self, index: int) -> bool:
        if index == self.state.toolbar_position_index:
            return False
        symbol = TOOLBAR_POSITIONS.encode(index)
        self.state.toolbar_position_index = index
        self._settings.properties.toolbar_position = symbol
        self.commit()
        return True

    def set_toolbar_monitor_index(self, index: int) -> bool:
        if index == self.state.toolbar_monitor_index:
            return False
        symbol = TOOLBAR_MONITORS.encode(index)
        self.state.toolbar_monitor_index = index
        self._settings.properties.toolbar_monitor = symbol
        self.commit()
        return True

    def set_hide_toolbar_when_unmuted(self, hide: bool) -> bool:
        hide = bool(hide)
        if hide == self.state.hide_toolbar_when_unmuted:
            return False
        self.state.hide_toolbar_when_unmuted = hide
        self._settings.properties.hide_toolbar_when_unmuted = hide
        self.commit()
        return True

    def set_overlay_image_path(self, path: str) -> bool:
        if path == self.state.overlay_image_path:
            return False
        self._apply_overlay_path(path)
        return True

    # ------------------------------------------------------------------
    # Overlay image

    def _apply_overlay_path(self, path: str) -> CommitResult:
        self.state.overlay_image_path = path
        self._settings.properties.camera_overlay_image_path = path
        return self.commit()

    def clear_overlay_image(self) -> CommitResult:
        return self._apply_overlay_path("")

    @property
    def pick_pending(self) -> bool:
        return self._pick_pending

    async def select_overlay_image(self) -> bool:
        """Ask the picker for an image and commit it; never raises.

        Returns True when a new path was committed. A second call while a
        pick is still pending returns False without opening another picker.
        """
        if self._picker is None:
            self.logger.warning("No file picker configured; overlay selection skipped")
            return False
        if self._pick_pending:
            self.logger.info("Overlay image pick already in progress")
            return False

        self._pick_pending = True
        try:
            picked = await self._picker.pick()
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            self.logger.info("Overlay image pick cancelled")
            return False
        except Exception as exc:
            self.logger.warning("Overlay image pick failed: %s", exc)
            return False
        finally:
            self._pick_pending = False

        if isinstance(picked, os.PathLike):
            picked = os.fspath(picked)
        if picked is not None and not isinstance(picked, str):
            self.logger.warning("Overlay image pick returned %s, expected a path", type(picked).__name__)
            return False
        if not picked:
            self.logger.debug("No overlay image picked")
            return False
        self._apply_overlay_path(picked)
        self.logger.info("Overlay image set to %s", picked)
        return True

    # ------------------------------------------------------------------
    # Introspection

    def snapshot(self) -> Dict[str, Any]:
        return {
            "module": C.MODULE_NAME,
            "path": self._settings_path,
            "cameras": list(self.cameras),
            "microphones": list(self.microphones),
            "state": self.state.to_dict(),
            "settings": self._settings.to_dict(),
        }


__all__ = ["CommitResult", "VideoConferenceSettingsEngine"]
