"""MCP tool definitions for the todo list."""

# Import all tools to register them with the MCP server
from todolist_mcp.tools.core import (
    todo_add,
    todo_delete,
    todo_get,
    todo_list,
    todo_move,
    todo_state,
    todo_toggle_complete,
)
from todolist_mcp.tools.drafts import (
    todo_begin_compose,
    todo_begin_edit,
    todo_cancel,
    todo_commit,
    todo_update_draft,
)
from todolist_mcp.tools.persistence import todo_load, todo_save

__all__ = [
    # Core tools
    "todo_list",
    "todo_get",
    "todo_state",
    "todo_add",
    "todo_toggle_complete",
    "todo_delete",
    "todo_move",
    # Draft tools
    "todo_begin_compose",
    "todo_begin_edit",
    "todo_update_draft",
    "todo_commit",
    "todo_cancel",
    # Persistence tools
    "todo_save",
    "todo_load",
]
