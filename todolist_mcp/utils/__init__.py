"""Utility functions for the todo list MCP server."""

from todolist_mcp.utils.files import _read_bytes, _write_bytes
from todolist_mcp.utils.formatters import (
    _format_edit_state,
    _format_result,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)

__all__ = [
    "_read_bytes",
    "_write_bytes",
    "_format_edit_state",
    "_format_result",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
]
