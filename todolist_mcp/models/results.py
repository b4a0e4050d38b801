"""Result model returned by every task list operation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from todolist_mcp.enums import ErrorCode


class OperationResult(BaseModel):
    """Outcome of a controller or session operation.

    Attributes:
        ok: Whether the operation took effect.
        op: Operation name (e.g. ``"commit_compose"``).
        task_id: The task the operation touched, when there is one.
        error: Failure kind if ``ok`` is False.
        message: Human-readable summary, suitable for display as-is.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    task_id: int | None = None
    error: ErrorCode | None = None
    message: str = ""

    @classmethod
    def success(cls, op: str, message: str, task_id: int | None = None) -> OperationResult:
        return cls(ok=True, op=op, task_id=task_id, message=message)

    @classmethod
    def failure(cls, op: str, error: ErrorCode, message: str, task_id: int | None = None) -> OperationResult:
        return cls(ok=False, op=op, task_id=task_id, error=error, message=message)
