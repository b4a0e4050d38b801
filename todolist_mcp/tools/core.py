"""Core MCP tool definitions: reading and changing tasks."""

import json

from mcp.types import ToolAnnotations

from todolist_mcp.enums import ResponseFormat
from todolist_mcp.models.inputs import (
    AddTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    MoveTaskInput,
    StateInput,
    ToggleCompleteInput,
)
from todolist_mcp.server import get_session, mcp
from todolist_mcp.utils.formatters import (
    _format_edit_state,
    _format_result,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)


@mcp.tool(
    name="todo_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_list(params: ListTasksInput) -> str:
    """
    Show the todo list in order, along with any open draft.

    USE THIS WHEN:
    - Looking up task ids before editing, toggling, moving or deleting
    - Checking whether a compose or edit draft is still open

    Args:
        params: ListTasksInput containing include_completed and response_format

    Returns:
        Formatted task list (concise, markdown or JSON based on response_format)

    Examples:
        - Everything: params with defaults
        - Only open items: params with include_completed=False
        - For chaining: params with response_format="json"
    """
    session = get_session()
    controller = session.controller
    all_tasks = list(controller.tasks)
    tasks = all_tasks if params.include_completed else [t for t in all_tasks if not t.completed]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": len(all_tasks),
                "count": len(tasks),
                "tasks": [t.model_dump() for t in tasks],
                "edit_state": controller.edit_state.model_dump(mode="json"),
                "next_id": controller.next_id,
                "current_file": str(session.current_file) if session.current_file else None,
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks)

    title = "Todo List" if params.include_completed else "Todo List (open)"
    return _format_tasks_markdown(tasks, controller.edit_state, title)


@mcp.tool(
    name="todo_get",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_get(params: GetTaskInput) -> str:
    """
    Retrieve a single task by id.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        The task (concise, markdown or JSON) or an error if the id is unknown
    """
    task = get_session().controller.get_task(params.task_id)
    if task is None:
        return f"Error: Task {params.task_id} not found."

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(), indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)
    return _format_task_markdown(task)


@mcp.tool(
    name="todo_state",
    annotations=ToolAnnotations(
        title="Get Edit State",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_state(params: StateInput) -> str:
    """
    Report the open draft: idle, composing a new task, or editing one.

    Args:
        params: StateInput containing response_format

    Returns:
        Edit state description (JSON includes mode, task_id and draft)
    """
    state = get_session().controller.edit_state
    if params.response_format == ResponseFormat.JSON:
        return json.dumps(state.model_dump(mode="json"), indent=2)
    return _format_edit_state(state)


@mcp.tool(
    name="todo_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_add(params: AddTaskInput) -> str:
    """
    Append a new task in one step (compose, fill in, commit).

    USE THIS WHEN:
    - Adding a task whose text is already known

    DO NOT USE WHEN:
    - Another draft is open → commit or cancel it first
    - Building the text over several calls → use todo_begin_compose and todo_update_draft

    Args:
        params: AddTaskInput containing description

    Returns:
        Confirmation with the new task id, or a busy error

    Examples:
        - params with description="Buy milk"
    """
    controller = get_session().controller
    started = controller.begin_compose()
    if not started.ok:
        return _format_result(started)
    controller.update_draft(params.description)
    return _format_result(controller.commit_compose())


@mcp.tool(
    name="todo_toggle_complete",
    annotations=ToolAnnotations(
        title="Toggle Task Completion",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_toggle_complete(params: ToggleCompleteInput) -> str:
    """
    Flip a task between complete and not complete.

    Works whether or not a draft is open.

    Args:
        params: ToggleCompleteInput containing the task_id

    Returns:
        Confirmation with the new state, or a not-found error
    """
    return _format_result(get_session().controller.toggle_complete(params.task_id))


@mcp.tool(
    name="todo_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_delete(params: DeleteTaskInput) -> str:
    """
    Remove a task from the list.

    If the task is the one being edited, the edit is discarded too. Deleted
    ids are never reused.

    Args:
        params: DeleteTaskInput containing the task_id

    Returns:
        Confirmation message, or a not-found error
    """
    return _format_result(get_session().controller.delete(params.task_id))


@mcp.tool(
    name="todo_move",
    annotations=ToolAnnotations(
        title="Move Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_move(params: MoveTaskInput) -> str:
    """
    Move a task to a new position in the list.

    Args:
        params: MoveTaskInput containing task_id and 0-based position

    Returns:
        Confirmation with the resulting position, or a not-found error

    Examples:
        - To the top: params with task_id=4, position=0
        - To the bottom: params with task_id=4, position=999
    """
    return _format_result(get_session().controller.move_task(params.task_id, params.position))
