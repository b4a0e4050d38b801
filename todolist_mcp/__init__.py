"""
MCP server for a simple ordered todo list.

Tasks are short text items that can be added, edited in place, marked
complete, reordered, deleted, and saved to or loaded from a JSON file.
At most one draft (a new task being composed, or an existing task being
edited) is open at a time.
"""

# Re-export enums
from todolist_mcp.enums import EditMode, ErrorCode, ResponseFormat

# Re-export errors
from todolist_mcp.errors import DecodeError, StorageIOError, TodoListError

# Re-export models
from todolist_mcp.models import (
    IDLE,
    AddTaskInput,
    BeginEditInput,
    ComposingState,
    DeleteTaskInput,
    EditingState,
    EditState,
    GetTaskInput,
    IdleState,
    ListTasksInput,
    LoadInput,
    MoveTaskInput,
    OperationResult,
    SaveInput,
    StateInput,
    TaskModel,
    ToggleCompleteInput,
    UpdateDraftInput,
)

# Re-export core components
from todolist_mcp.codec import deserialize, serialize
from todolist_mcp.controller import TaskListController
from todolist_mcp.picker import ArgumentPicker, FilePicker
from todolist_mcp.session import TodoSession

# Re-export MCP server instance
from todolist_mcp.server import get_session, load_startup_file, mcp, reset_session

# Re-export tools
from todolist_mcp.tools import (
    todo_add,
    todo_begin_compose,
    todo_begin_edit,
    todo_cancel,
    todo_commit,
    todo_delete,
    todo_get,
    todo_list,
    todo_load,
    todo_move,
    todo_save,
    todo_state,
    todo_toggle_complete,
    todo_update_draft,
)

# Re-export utilities (including private functions used by tests)
from todolist_mcp.utils import (
    _format_edit_state,
    _format_result,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _read_bytes,
    _write_bytes,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "EditMode",
    "ErrorCode",
    # Errors
    "TodoListError",
    "DecodeError",
    "StorageIOError",
    # Task list models
    "TaskModel",
    "IdleState",
    "ComposingState",
    "EditingState",
    "EditState",
    "IDLE",
    "OperationResult",
    # Tool input models
    "ListTasksInput",
    "GetTaskInput",
    "StateInput",
    "UpdateDraftInput",
    "BeginEditInput",
    "AddTaskInput",
    "ToggleCompleteInput",
    "DeleteTaskInput",
    "MoveTaskInput",
    "SaveInput",
    "LoadInput",
    # Core components
    "serialize",
    "deserialize",
    "TaskListController",
    "FilePicker",
    "ArgumentPicker",
    "TodoSession",
    # Utility functions
    "_read_bytes",
    "_write_bytes",
    "_format_edit_state",
    "_format_result",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    # Tools
    "todo_list",
    "todo_get",
    "todo_state",
    "todo_add",
    "todo_toggle_complete",
    "todo_delete",
    "todo_move",
    "todo_begin_compose",
    "todo_begin_edit",
    "todo_update_draft",
    "todo_commit",
    "todo_cancel",
    "todo_save",
    "todo_load",
    # MCP server
    "mcp",
    "get_session",
    "load_startup_file",
    "reset_session",
]
