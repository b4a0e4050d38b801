"""File-picker collaborator.

The picker is the only suspending step in a save or load: it yields a
path, or ``None`` when the user cancels, before any file I/O happens.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FilePicker(Protocol):
    """Chooses the file for a save or load."""

    async def pick_save_path(self, suggested: Path | None) -> Path | None:
        """Return the file to write, or ``None`` if cancelled."""
        ...

    async def pick_open_path(self) -> Path | None:
        """Return the file to read, or ``None`` if cancelled."""
        ...


class ArgumentPicker:
    """Picker backed by a path passed in with the request.

    Relative paths are resolved against ``base_dir``. Saving without a path
    accepts the suggested default (the current file); with neither, the pick
    counts as cancelled. Loading without a path is always cancelled.
    """

    def __init__(self, path: str | None, base_dir: Path) -> None:
        self._path = path
        self._base_dir = base_dir

    async def pick_save_path(self, suggested: Path | None) -> Path | None:
        if self._path:
            return self._resolve(self._path)
        return suggested

    async def pick_open_path(self) -> Path | None:
        if self._path:
            return self._resolve(self._path)
        return None

    def _resolve(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        return path if path.is_absolute() else self._base_dir / path
