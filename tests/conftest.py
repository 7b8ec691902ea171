"""Shared pytest configuration and fixtures for the settings sync test suite."""

import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from settings_sync.core.general_settings import GeneralSettingsRepository  # noqa: E402
from settings_sync.modules.base.devices import StaticDeviceProvider  # noqa: E402
from tests.infrastructure.mocks.settings_mocks import RecordingChannel, RecordingStore  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_state_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default settings root at a per-test directory."""
    state_dir = tmp_path / "state"
    monkeypatch.setenv("SETTINGS_SYNC_STATE_DIR", str(state_dir))
    return state_dir


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def general(store: RecordingStore, channel: RecordingChannel) -> GeneralSettingsRepository:
    return GeneralSettingsRepository(store, channel)


@pytest.fixture
def devices() -> StaticDeviceProvider:
    return StaticDeviceProvider(
        cameras=["Integrated Camera", "USB Camera"],
        microphones=["Microphone Array", "Headset Microphone"],
    )
