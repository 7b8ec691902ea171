"""Device name lists consumed by module settings."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, Tuple, runtime_checkable

ALL_MICROPHONES = "[All]"


@runtime_checkable
class DeviceNameProvider(Protocol):
    """Enumerates capture devices by display name, in selector order."""

    def list_cameras(self) -> Sequence[str]:
        ...

    def list_microphones(self) -> Sequence[str]:
        ...


class StaticDeviceProvider:
    """Provider backed by fixed name lists (CLI flags, tests)."""

    def __init__(self, cameras: Iterable[str] = (), microphones: Iterable[str] = ()) -> None:
        self._cameras = tuple(cameras)
        self._microphones = tuple(microphones)

    def list_cameras(self) -> Sequence[str]:
        return self._cameras

    def list_microphones(self) -> Sequence[str]:
        return self._microphones


def camera_names(provider: DeviceNameProvider) -> Tuple[str, ...]:
    return tuple(provider.list_cameras())


def microphone_names(provider: DeviceNameProvider) -> Tuple[str, ...]:
    """Provider microphones with the "all microphones" sentinel first."""
    return (ALL_MICROPHONES, *provider.list_microphones())


__all__ = [
    "ALL_MICROPHONES",
    "DeviceNameProvider",
    "StaticDeviceProvider",
    "camera_names",
    "microphone_names",
]
