"""Fixtures for Video Conference settings engine tests."""

from __future__ import annotations

from typing import Callable, Optional

import pytest

from settings_sync.modules.base.devices import StaticDeviceProvider
from settings_sync.modules.VideoConference import VideoConferenceSettingsEngine
from tests.infrastructure.mocks.settings_mocks import VC_SETTINGS_PATH, vc_settings_document


@pytest.fixture
def make_engine(store, channel, general, devices) -> Callable[..., VideoConferenceSettingsEngine]:
    def factory(
        *,
        provider: Optional[StaticDeviceProvider] = None,
        picker=None,
        config_subfolder: str = "",
    ) -> VideoConferenceSettingsEngine:
        return VideoConferenceSettingsEngine(
            store,
            channel,
            general,
            provider or devices,
            picker,
            config_subfolder=config_subfolder,
        )

    return factory


@pytest.fixture
def engine(store, channel, make_engine) -> VideoConferenceSettingsEngine:
    """Engine loaded from a clean, fully reconciled document; logs cleared."""
    store.put(VC_SETTINGS_PATH, vc_settings_document(selected_camera="USB Camera", selected_mic="Headset Microphone"))
    built = make_engine()
    store.reset_log()
    channel.reset_log()
    return built
