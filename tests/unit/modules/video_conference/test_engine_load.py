"""Unit tests for loading and reconciling Video Conference settings."""

import pytest

from settings_sync.core.general_settings import GENERAL_SETTINGS_PATH, GeneralSettings, GeneralSettingsRepository
from settings_sync.core.settings_store import SettingsStore
from settings_sync.modules.base.devices import ALL_MICROPHONES, StaticDeviceProvider
from settings_sync.modules.base.hotkey import Hotkey
from settings_sync.modules.VideoConference import UNSET_INDEX, VideoConferenceSettings, VideoConferenceSettingsEngine
from tests.infrastructure.mocks.settings_mocks import VC_SETTINGS_PATH, vc_settings_document


class TestLoadRecovery:
    """Unreadable documents are replaced with defaults right away."""

    @pytest.mark.parametrize("raw", ["{truncated", "[]", '{"properties": []}'])
    def test_corrupt_document_is_reset(self, store, channel, make_engine, raw):
        store.put_raw(VC_SETTINGS_PATH, raw)

        engine = make_engine(provider=StaticDeviceProvider())

        assert engine.state.selected_camera_index == UNSET_INDEX
        assert engine.state.toolbar_position_index == 2
        assert engine.settings.properties.selected_mic == ALL_MICROPHONES
        assert store.get(VC_SETTINGS_PATH) == engine.settings.to_dict()
        assert channel.messages == []

    def test_missing_document_is_created(self, store, make_engine):
        engine = make_engine()

        stored = store.get(VC_SETTINGS_PATH)
        assert stored == engine.settings.to_dict()
        assert stored["properties"]["selected_camera"] == {"value": "Integrated Camera"}

    def test_recovery_round_trip_without_devices(self, store, make_engine):
        store.put_raw(VC_SETTINGS_PATH, "not json at all")
        make_engine(provider=StaticDeviceProvider())

        expected = VideoConferenceSettings()
        expected.properties.selected_mic = ALL_MICROPHONES
        assert store.get(VC_SETTINGS_PATH) == expected.to_dict()

    def test_write_failure_during_recovery_is_contained(self, store, make_engine):
        store.put_raw(VC_SETTINGS_PATH, "{")
        store.fail_writes = True

        engine = make_engine()

        assert engine.state.selected_camera_index == 0
        assert store.blobs[VC_SETTINGS_PATH] == "{"

    def test_subfolder_is_part_of_path(self, store, make_engine):
        engine = make_engine(config_subfolder="profiles\\work")
        assert engine.settings_path == "profiles/work/Video Conference"
        assert store.saves_for("profiles/work/Video Conference")


class TestDeviceReconciliation:

    def test_empty_camera_selects_first_and_saves_once(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="", selected_mic="Microphone Array"))

        engine = make_engine()

        assert engine.state.selected_camera_index == 0
        assert engine.settings.properties.selected_camera == "Integrated Camera"
        saves = store.saves_for(VC_SETTINGS_PATH)
        assert len(saves) == 1
        assert saves[0]["properties"]["selected_camera"] == {"value": "Integrated Camera"}

    def test_empty_camera_without_devices_stays_unset(self, store, make_engine):
        provider = StaticDeviceProvider(microphones=["Mic"])
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="", selected_mic="Mic"))

        engine = make_engine(provider=provider)

        assert engine.state.selected_camera_index == UNSET_INDEX
        assert store.saves == []

    def test_empty_microphone_selects_sentinel(self, store, make_engine):
        provider = StaticDeviceProvider(cameras=["Cam"], microphones=["Zeta Mic", "Alpha Mic"])
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="Cam", selected_mic=""))

        engine = make_engine(provider=provider)

        assert engine.state.selected_microphone_index == 0
        assert engine.microphones[0] == ALL_MICROPHONES
        assert engine.settings.properties.selected_mic == ALL_MICROPHONES
        assert len(store.saves_for(VC_SETTINGS_PATH)) == 1

    def test_both_empty_still_saves_once(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="", selected_mic=""))
        make_engine()
        assert len(store.saves_for(VC_SETTINGS_PATH)) == 1

    def test_known_devices_are_matched_by_name(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="USB Camera", selected_mic="Headset Microphone"))

        engine = make_engine()

        assert engine.state.selected_camera_index == 1
        assert engine.state.selected_microphone_index == 2
        assert store.saves == []

    def test_unplugged_devices_become_unset(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="Old Webcam", selected_mic="Old Mic"))

        engine = make_engine()

        assert engine.state.selected_camera_index == UNSET_INDEX
        assert engine.state.selected_microphone_index == UNSET_INDEX
        assert engine.settings.properties.selected_camera == "Old Webcam"
        assert store.saves == []

    def test_name_match_is_exact(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="usb camera", selected_mic="[All]"))

        engine = make_engine()

        assert engine.state.selected_camera_index == UNSET_INDEX
        assert engine.state.selected_microphone_index == 0


class TestOptionDecoding:

    def test_known_symbols(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(
            selected_camera="USB Camera",
            selected_mic="[All]",
            toolbar_position="Bottom left corner",
            toolbar_monitor="All monitors",
        ))

        engine = make_engine()

        assert engine.state.toolbar_position_index == 3
        assert engine.state.toolbar_monitor_index == 1

    def test_unknown_symbols_leave_default_index(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(
            selected_camera="USB Camera",
            selected_mic="[All]",
            toolbar_position="Somewhere else",
            toolbar_monitor="",
        ))

        engine = make_engine()

        assert engine.state.toolbar_position_index == 0
        assert engine.state.toolbar_monitor_index == 0
        assert engine.settings.properties.toolbar_position == "Somewhere else"
        assert store.saves == []


class TestDerivedFields:

    def test_hotkeys_overlay_and_flags(self, store, make_engine):
        store.put(VC_SETTINGS_PATH, vc_settings_document(
            selected_camera="USB Camera",
            selected_mic="[All]",
            mute_camera_hotkey={"win": False, "ctrl": True, "alt": True, "shift": False, "code": 67, "key": "C"},
            mute_microphone_hotkey=None,
            camera_overlay_image_path="/images/away.png",
            hide_toolbar_when_unmuted=False,
        ))

        engine = make_engine()

        assert engine.state.camera_hotkey == Hotkey.of(67, ctrl=True, alt=True)
        assert engine.state.microphone_hotkey is None
        assert engine.state.camera_and_microphone_hotkey == Hotkey.of(0x51, win=True, shift=True)
        assert engine.state.overlay_image_path == "/images/away.png"
        assert engine.state.hide_toolbar_when_unmuted is False

    def test_enabled_comes_from_general_settings(self, store, channel, general, make_engine):
        general.settings.enabled["Video Conference"] = False
        assert make_engine().state.enabled is False

    def test_enabled_defaults_to_true(self, make_engine):
        assert make_engine().state.enabled is True

    def test_elevation_flag_is_read_through(self, general, make_engine):
        general.settings.is_elevated = True
        assert make_engine().is_elevated is True


class TestHostileFiles:
    """Files on disk that cannot be decoded never escape engine setup."""

    DEEPLY_NESTED = "[" * 200000 + "]" * 200000

    def test_deeply_nested_files_are_reset(self, tmp_path, channel, devices):
        store = SettingsStore(tmp_path)
        for path in (GENERAL_SETTINGS_PATH, VC_SETTINGS_PATH):
            target = store.file_for(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.DEEPLY_NESTED, encoding="utf-8")

        general = GeneralSettingsRepository(store, channel)
        engine = VideoConferenceSettingsEngine(store, channel, general, devices)

        assert general.settings == GeneralSettings()
        assert engine.state.selected_camera_index == 0
        assert store.get(VC_SETTINGS_PATH) == engine.settings.to_dict()

    def test_deeply_nested_blob_in_memory_store(self, store, make_engine):
        store.put_raw(VC_SETTINGS_PATH, self.DEEPLY_NESTED)

        engine = make_engine()

        assert store.get(VC_SETTINGS_PATH) == engine.settings.to_dict()
