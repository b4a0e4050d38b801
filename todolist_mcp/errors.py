"""Exceptions raised at the persistence seams."""

from pathlib import Path

from todolist_mcp.enums import ErrorCode


class TodoListError(Exception):
    """Base class for todo list failures."""

    code: ErrorCode


class DecodeError(TodoListError):
    """Persisted data does not have the expected shape."""

    code = ErrorCode.DECODE_ERROR


class StorageIOError(TodoListError):
    """A task file could not be read or written."""

    code = ErrorCode.IO_ERROR

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
