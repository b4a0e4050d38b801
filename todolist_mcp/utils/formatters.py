"""Formatting utilities for tool output."""

from todolist_mcp.models.results import OperationResult
from todolist_mcp.models.state import ComposingState, EditingState, EditState
from todolist_mcp.models.task import TaskModel


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task on one line.

    Output: "#5 [x] Description"
    """
    mark = "x" if task.completed else " "
    desc = task.description[:60] if task.description else "(empty)"
    return f"#{task.id} [{mark}] {desc}"


def _format_tasks_concise(tasks: list[TaskModel]) -> str:
    """
    Format a list of tasks one per line under a count header.

    Output:
    2 task(s), 1 done
    #1 [x] Buy milk
    #2 [ ] Call mom
    """
    if not tasks:
        return "0 tasks"

    done = sum(1 for t in tasks if t.completed)
    lines = [f"{len(tasks)} task(s), {done} done"]
    lines.extend(_format_task_concise(t) for t in tasks)
    return "\n".join(lines)


def _format_task_markdown(task: TaskModel, editing: bool = False) -> str:
    """Format a single task as a markdown checklist item."""
    mark = "x" if task.completed else " "
    desc = task.description or "*(empty)*"
    if task.completed and task.description:
        desc = f"~~{desc}~~"
    line = f"- [{mark}] **{task.id}**: {desc}"
    if editing:
        line += " *(editing)*"
    return line


def _format_edit_state(state: EditState) -> str:
    """Describe the open draft, if any."""
    if isinstance(state, ComposingState):
        return f"Composing new task: {state.draft!r}"
    if isinstance(state, EditingState):
        return f"Editing task {state.task_id}: {state.draft!r}"
    return "Idle"


def _format_tasks_markdown(tasks: list[TaskModel], state: EditState, title: str = "Todo List") -> str:
    """Format the task list and edit state as markdown."""
    editing_id = state.task_id if isinstance(state, EditingState) else None

    lines = [f"# {title}"]
    if tasks:
        done = sum(1 for t in tasks if t.completed)
        lines.append(f"*{len(tasks)} task(s), {done} done*")
        lines.append("")
        lines.extend(_format_task_markdown(t, editing=t.id == editing_id) for t in tasks)
    else:
        lines.append("")
        lines.append("No tasks yet.")

    if isinstance(state, (ComposingState, EditingState)):
        lines.append("")
        lines.append(f"**Draft**: {_format_edit_state(state)}")

    return "\n".join(lines)


def _format_result(result: OperationResult) -> str:
    """Render an operation result the way tools report outcomes."""
    if result.ok:
        return result.message
    return f"Error: {result.message}"
