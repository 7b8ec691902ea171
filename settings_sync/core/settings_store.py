import asyncio
import contextlib
import json
import re
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

import aiofiles

from .errors import SettingsReadError, SettingsWriteError
from .file_sync_utils import atomic_write_text, safe_fsync
from .logging_utils import get_module_logger
from .paths import SETTINGS_FILE_NAME, default_settings_root


Blob = Union[Mapping[str, Any], str]

_PATH_SEPARATORS = re.compile(r"[\\/]+")


@runtime_checkable
class SettingsStoreProtocol(Protocol):
    """Get/save contract every settings backend implements.

    ``path`` is a hierarchical key such as ``"profiles/Video Conference"``;
    ``get`` raises SettingsReadError and ``save`` raises SettingsWriteError.
    """

    def get(self, path: str) -> Dict[str, Any]:
        ...

    def save(self, path: str, blob: Blob) -> None:
        ...


def split_settings_path(path: str) -> list[str]:
    parts = [part.strip() for part in _PATH_SEPARATORS.split(path or "")]
    parts = [part for part in parts if part]
    for part in parts:
        if part in (".", ".."):
            raise ValueError(f"Relative segment '{part}' not allowed in settings path '{path}'")
    return parts


def join_settings_path(*segments: str) -> str:
    parts: list[str] = []
    for segment in segments:
        parts.extend(split_settings_path(segment))
    return "/".join(parts)


class SettingsStore:
    """JSON settings files laid out as ``<root>/<path>/settings.json``."""

    def __init__(self, root: Optional[Path] = None, *, file_name: str = SETTINGS_FILE_NAME):
        self.logger = get_module_logger("SettingsStore")
        self.lock = asyncio.Lock()
        self._write_lock = threading.Lock()
        self._root = Path(root) if root is not None else default_settings_root()
        self._file_name = file_name

    @property
    def root(self) -> Path:
        return self._root

    def file_for(self, path: str) -> Path:
        return self._root.joinpath(*split_settings_path(path), self._file_name)

    # ------------------------------------------------------------------
    # Internal helpers

    @staticmethod
    def _serialize(path: str, blob: Blob) -> str:
        if isinstance(blob, str):
            return blob if blob.endswith("\n") else blob + "\n"
        try:
            return json.dumps(dict(blob), indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise SettingsWriteError(path, "payload is not JSON serializable", cause=exc) from exc

    @staticmethod
    def _parse(path: str, text: str) -> Dict[str, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsReadError(path, f"invalid JSON ({exc.msg})", cause=exc) from exc
        except RecursionError as exc:
            raise SettingsReadError(path, "JSON nested too deeply", cause=exc) from exc
        if not isinstance(data, dict):
            raise SettingsReadError(path, "root element is not an object")
        return data

    def _replace(self, source: Path, target: Path) -> None:
        with self._write_lock:
            source.replace(target)

    # ------------------------------------------------------------------
    # Synchronous API

    def get(self, path: str) -> Dict[str, Any]:
        target = self.file_for(path)
        try:
            text = target.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SettingsReadError(path, "no settings file", cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsReadError(path, str(exc), cause=exc) from exc
        return self._parse(path, text)

    def save(self, path: str, blob: Blob) -> None:
        text = self._serialize(path, blob)
        target = self.file_for(path)
        try:
            with self._write_lock:
                atomic_write_text(target, text)
        except OSError as exc:
            raise SettingsWriteError(path, str(exc), cause=exc) from exc
        self.logger.debug("Stored settings in %s", target)

    def exists(self, path: str) -> bool:
        return self.file_for(path).exists()

    # ------------------------------------------------------------------
    # Async API

    async def get_async(self, path: str) -> Dict[str, Any]:
        target = self.file_for(path)
        try:
            async with aiofiles.open(target, "r", encoding="utf-8") as fh:
                text = await fh.read()
        except FileNotFoundError as exc:
            raise SettingsReadError(path, "no settings file", cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsReadError(path, str(exc), cause=exc) from exc
        return self._parse(path, text)

    async def save_async(self, path: str, blob: Blob) -> None:
        text = self._serialize(path, blob)
        target = self.file_for(path)
        tmp_path = target.with_name(f".{target.name}.{uuid.uuid4().hex[:8]}.tmp")
        async with self.lock:
            try:
                await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
                async with aiofiles.open(tmp_path, "w", encoding="utf-8") as fh:
                    await fh.write(text)
                    await fh.flush()
                    await asyncio.to_thread(safe_fsync, fh.fileno())
                await asyncio.to_thread(self._replace, tmp_path, target)
            except OSError as exc:
                with contextlib.suppress(OSError):
                    await asyncio.to_thread(tmp_path.unlink, missing_ok=True)
                raise SettingsWriteError(path, str(exc), cause=exc) from exc
        self.logger.debug("Stored settings in %s", target)


__all__ = [
    "Blob",
    "SettingsStore",
    "SettingsStoreProtocol",
    "join_settings_path",
    "split_settings_path",
]
