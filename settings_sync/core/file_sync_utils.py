"""
Durable write helpers for settings files.

On POSIX systems data is flushed with os.fsync(); on Windows with
msvcrt._commit(), which wraps FlushFileBuffers. Both are advisory: a
failed flush is logged and the write still counts.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

from settings_sync.core.logging_utils import get_module_logger

logger = get_module_logger("FileSync")

_msvcrt = None
if sys.platform == "win32":
    import msvcrt as _msvcrt


def safe_fsync(fd: int) -> bool:
    try:
        if _msvcrt is not None:
            _msvcrt._commit(fd)
        else:
            os.fsync(fd)
        return True
    except OSError as e:
        logger.debug("fsync failed for fd %d: %s", fd, e)
        return False


def fsync_file(file_obj) -> bool:
    """Flush ``file_obj`` and sync it to disk; never raises."""
    try:
        file_obj.flush()
        return safe_fsync(file_obj.fileno())
    except (OSError, AttributeError, ValueError) as e:
        logger.debug("fsync_file failed: %s", e)
        return False


def atomic_write_text(target: Path, text: str) -> None:
    """Replace ``target`` with ``text`` via a temp file in the same folder.

    Readers see either the old or the new content, never a torn file.
    OSError from directory creation, the write or the rename propagates.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            dir=str(target.parent),
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(text)
            fsync_file(tmp)
        os.replace(tmp_path, target)
        tmp_path = None
    finally:
        if tmp_path is not None:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass


__all__ = ["atomic_write_text", "fsync_file", "safe_fsync"]
