"""Adapters for the external file picker used to choose overlay images."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

from settings_sync.core.errors import PickerError


@runtime_checkable
class FilePicker(Protocol):
    def pick(self) -> Awaitable[Optional[str]]:
        ...


class CallbackFilePicker:
    """Wraps a callable returning a path, an awaitable or a future.

    A plain return value is accepted too, so synchronous dialogs and test
    lambdas can be used directly.
    """

    def __init__(self, callback: Callable[[], Any]) -> None:
        self._callback = callback

    async def pick(self) -> Optional[str]:
        result = self._callback()
        if inspect.isawaitable(result):
            result = await result
        if result is None:
            return None
        if not isinstance(result, str):
            raise PickerError(f"Picker returned {type(result).__name__}, expected a path string")
        return result


class FixedPathPicker:
    """Resolves to a preset path after yielding once to the event loop."""

    def __init__(self, path: Optional[str]) -> None:
        self._path = path

    async def pick(self) -> Optional[str]:
        await asyncio.sleep(0)
        return self._path


__all__ = ["CallbackFilePicker", "FilePicker", "FixedPathPicker"]
