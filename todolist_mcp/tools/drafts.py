"""MCP tools for the compose and edit workflows."""

from mcp.types import ToolAnnotations

from todolist_mcp.models.inputs import BeginEditInput, UpdateDraftInput
from todolist_mcp.server import get_session, mcp
from todolist_mcp.utils.formatters import _format_result


@mcp.tool(
    name="todo_begin_compose",
    annotations=ToolAnnotations(
        title="Begin New Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_begin_compose() -> str:
    """
    Open an empty draft for a new task.

    Only one draft may be open at a time; this fails with a busy error while
    another task is being composed or edited.

    Returns:
        Confirmation, or a busy error
    """
    return _format_result(get_session().controller.begin_compose())


@mcp.tool(
    name="todo_begin_edit",
    annotations=ToolAnnotations(
        title="Begin Editing Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_begin_edit(params: BeginEditInput) -> str:
    """
    Open a task's description as a draft for editing.

    Args:
        params: BeginEditInput containing the task_id

    Returns:
        Confirmation, a busy error if another draft is open, or a not-found error
    """
    return _format_result(get_session().controller.begin_edit(params.task_id))


@mcp.tool(
    name="todo_update_draft",
    annotations=ToolAnnotations(
        title="Update Draft",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_update_draft(params: UpdateDraftInput) -> str:
    """
    Replace the open draft's text (new task or edit).

    Args:
        params: UpdateDraftInput containing the full replacement text

    Returns:
        Confirmation, or an error if no draft is open
    """
    return _format_result(get_session().controller.update_draft(params.text))


@mcp.tool(
    name="todo_commit",
    annotations=ToolAnnotations(
        title="Commit Draft",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_commit() -> str:
    """
    Commit whichever draft is open.

    A new task is appended only if its trimmed text is non-empty. An edit
    always replaces the description, even with empty text.

    Returns:
        Confirmation with the affected task id, or an error if no draft is open
    """
    return _format_result(get_session().controller.commit_draft())


@mcp.tool(
    name="todo_cancel",
    annotations=ToolAnnotations(
        title="Cancel Draft",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_cancel() -> str:
    """
    Discard whichever draft is open, leaving the list unchanged.

    Returns:
        Confirmation, or an error if no draft is open
    """
    return _format_result(get_session().controller.cancel_draft())
