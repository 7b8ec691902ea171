"""Integration fixtures wiring the file-backed store to a real engine.

Unlike the unit fixtures, these write actual ``settings.json`` files under
a temporary root and capture notifications on an in-memory text stream.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest

from settings_sync.core.general_settings import GeneralSettingsRepository
from settings_sync.core.notification_channel import StreamNotificationChannel
from settings_sync.core.settings_store import SettingsStore
from settings_sync.modules.base.devices import StaticDeviceProvider
from settings_sync.modules.VideoConference import VideoConferenceSettingsEngine


@pytest.fixture
def settings_root(tmp_path: Path) -> Path:
    return tmp_path / "settings"


@pytest.fixture
def file_store(settings_root: Path) -> SettingsStore:
    return SettingsStore(settings_root)


@pytest.fixture
def output_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stream_channel(output_stream: io.StringIO) -> StreamNotificationChannel:
    return StreamNotificationChannel(output_stream)


@pytest.fixture
def open_engine(file_store, stream_channel) -> Callable[..., VideoConferenceSettingsEngine]:
    """Build a fresh engine over the same files, as a new settings page would."""

    def factory(cameras=("Integrated Camera",), microphones=("Headset Microphone",), picker=None):
        general = GeneralSettingsRepository(file_store, stream_channel)
        return VideoConferenceSettingsEngine(
            file_store,
            stream_channel,
            general,
            StaticDeviceProvider(cameras, microphones),
            picker,
        )

    return factory
