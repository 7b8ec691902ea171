"""Delivery of serialized settings snapshots to the control process."""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Protocol, TextIO, runtime_checkable

from settings_sync.core.logging_utils import get_module_logger

logger = get_module_logger("NotificationChannel")

SEND_FAILED = -1


@runtime_checkable
class NotificationChannel(Protocol):
    """``send`` delivers one message and returns a status code.

    Callers treat the channel as fire-and-forget and do not inspect the code.
    """

    def send(self, message: str) -> int:
        ...


class StreamNotificationChannel:
    """Writes each JSON message as one line on a text stream.

    Mirrors how modules report to their parent process over stdout. Messages
    that are not JSON objects are refused, as are sends after ``close``.
    """

    def __init__(self, output_stream: Optional[TextIO] = None) -> None:
        self._stream = output_stream
        self._closed = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def close(self) -> None:
        self._closed = True

    def send(self, message: str) -> int:
        if self._closed:
            logger.warning("Channel closed; dropping message (%d chars)", len(message))
            return SEND_FAILED
        text = message.strip()
        if not text.startswith("{"):
            logger.warning("Refusing non-JSON message: %s", text[:100])
            return SEND_FAILED
        try:
            print(text, file=self.stream, flush=True)
        except (OSError, ValueError) as exc:
            logger.error("Failed to write message to stream: %s", exc)
            return SEND_FAILED
        return len(text)


class CallbackNotificationChannel:
    """Adapts a plain ``send(str) -> int`` callable to the channel contract."""

    def __init__(self, callback: Callable[[str], Optional[int]]) -> None:
        self._callback = callback

    def send(self, message: str) -> int:
        result = self._callback(message)
        return SEND_FAILED if result is None else int(result)


class BufferedNotificationChannel:
    """Keeps every message in memory; used by the CLI dry-run and tests."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def send(self, message: str) -> int:
        self.messages.append(message)
        return 0


__all__ = [
    "BufferedNotificationChannel",
    "CallbackNotificationChannel",
    "NotificationChannel",
    "SEND_FAILED",
    "StreamNotificationChannel",
]
