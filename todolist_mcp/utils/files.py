"""File I/O utilities for task list persistence."""

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from todolist_mcp.errors import StorageIOError


def _read_bytes(path: Path) -> bytes:
    """
    Read a whole file.

    Raises:
        StorageIOError: The file is missing, unreadable, or a directory
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise StorageIOError(path, e.strerror or str(e)) from e


def _write_bytes(path: Path, data: bytes) -> None:
    """
    Replace a file's contents atomically.

    Data goes to a temporary file in the same directory which is then
    renamed over the target, so readers see either the old or the new
    contents and a failed write leaves the old file intact.

    Raises:
        StorageIOError: The directory is missing or not writable, the disk
            is full, or the rename fails
    """
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            with suppress(OSError):
                os.unlink(tmp_name)
        raise StorageIOError(path, e.strerror or str(e)) from e
