"""Persistence codec: task list <-> JSON bytes.

The file is a JSON array of ``{"id", "description", "completed"}`` objects.
Unknown keys are ignored so files written by newer versions (or by the old
desktop app, which stored a per-item ``edit`` flag) still load.
"""

from collections.abc import Sequence

import structlog
from pydantic import TypeAdapter, ValidationError

from todolist_mcp.errors import DecodeError
from todolist_mcp.models.task import TaskModel

logger = structlog.get_logger(__name__)

_TASK_LIST = TypeAdapter(list[TaskModel])


def serialize(tasks: Sequence[TaskModel], indent: int = 2) -> bytes:
    """
    Encode tasks as pretty-printed JSON, preserving order.

    Args:
        tasks: Tasks in display order
        indent: Spaces per nesting level; 0 writes compact JSON

    Returns:
        UTF-8 encoded JSON with a trailing newline
    """
    return _TASK_LIST.dump_json(list(tasks), indent=indent or None) + b"\n"


def deserialize(data: bytes) -> list[TaskModel]:
    """
    Decode a task list, rejecting anything that is not a well-formed one.

    Args:
        data: Raw file contents

    Returns:
        Tasks in stored order

    Raises:
        DecodeError: Invalid JSON or UTF-8, wrong shape, missing or mistyped
            fields, or duplicate ids
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Malformed task list: not UTF-8 ({e.reason} at byte {e.start})") from e

    try:
        tasks = _TASK_LIST.validate_json(text)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        logger.debug("decode_failed", errors=e.error_count(), location=location)
        raise DecodeError(f"Malformed task list at {location}: {first['msg']}") from e

    seen: set[int] = set()
    for task in tasks:
        if task.id in seen:
            raise DecodeError(f"Malformed task list: duplicate task id {task.id}")
        seen.add(task.id)

    return tasks
