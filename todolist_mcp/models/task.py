"""Core task model for the todo list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TaskModel(BaseModel):
    """A single todo item.

    Instances are frozen; the controller replaces a task with an updated
    copy rather than mutating it, so callers holding a reference never see
    it change underneath them.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    id: int = Field(..., ge=0)
    description: str
    completed: bool = Field(...)
