"""Edit state of the task list: at most one open draft at a time.

Each state's ``mode`` matches an :class:`~todolist_mcp.enums.EditMode` value.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class IdleState(BaseModel):
    """No draft is open."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["idle"] = "idle"


class ComposingState(BaseModel):
    """A new task is being written."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["composing"] = "composing"
    draft: str = ""


class EditingState(BaseModel):
    """An existing task's description is being rewritten."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["editing"] = "editing"
    task_id: int
    draft: str = ""


EditState = Annotated[Union[IdleState, ComposingState, EditingState], Field(discriminator="mode")]

IDLE = IdleState()
