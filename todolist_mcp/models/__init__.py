"""Pydantic models for the todo list MCP server."""

from todolist_mcp.models.inputs import (
    AddTaskInput,
    BeginEditInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    LoadInput,
    MoveTaskInput,
    SaveInput,
    StateInput,
    ToggleCompleteInput,
    UpdateDraftInput,
)
from todolist_mcp.models.results import OperationResult
from todolist_mcp.models.state import IDLE, ComposingState, EditingState, EditState, IdleState
from todolist_mcp.models.task import TaskModel

__all__ = [
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
]
