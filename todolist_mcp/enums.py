"""Enums for the todo list MCP server."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class EditMode(str, Enum):
    """Which draft, if any, is currently open."""

    IDLE = "idle"
    COMPOSING = "composing"
    EDITING = "editing"


class ErrorCode(str, Enum):
    """Failure kinds reported by controller and session operations."""

    NOT_FOUND = "not_found"
    BUSY = "busy"
    INVALID_STATE = "invalid_state"
    DECODE_ERROR = "decode_error"
    IO_ERROR = "io_error"
    CANCELLED = "cancelled"
