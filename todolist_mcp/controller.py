"""Task list controller: the ordered tasks plus the single open draft.

Every mutating method returns an :class:`OperationResult`. Rejections
(unknown id, another draft already open, wrong state) and persistence
failures are reported in the result and leave the list and edit state
exactly as they were.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from todolist_mcp.codec import deserialize, serialize
from todolist_mcp.enums import EditMode, ErrorCode
from todolist_mcp.errors import TodoListError
from todolist_mcp.models.results import OperationResult
from todolist_mcp.models.state import IDLE, ComposingState, EditingState, EditState
from todolist_mcp.models.task import TaskModel
from todolist_mcp.utils.files import _read_bytes, _write_bytes

logger = structlog.get_logger(__name__)


class TaskListController:
    """Owns the task sequence and the edit state machine.

    Ids come from a monotonic counter and are never handed out twice while
    the list lives; a successful :meth:`load` reseeds the counter above the
    largest loaded id.
    """

    def __init__(self, tasks: list[TaskModel] | None = None, *, json_indent: int = 2) -> None:
        self._tasks: list[TaskModel] = list(tasks or [])
        self._edit_state: EditState = IDLE
        self._next_id = _seed_next_id(self._tasks)
        self._json_indent = json_indent

    # -------------------- accessors --------------------

    @property
    def tasks(self) -> tuple[TaskModel, ...]:
        return tuple(self._tasks)

    @property
    def edit_state(self) -> EditState:
        return self._edit_state

    @property
    def next_id(self) -> int:
        return self._next_id

    def get_task(self, task_id: int) -> TaskModel | None:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------- compose workflow --------------------

    def begin_compose(self) -> OperationResult:
        busy = self._reject_if_busy("begin_compose")
        if busy:
            return busy
        self._set_state(ComposingState(draft=""))
        return OperationResult.success("begin_compose", "Composing a new task.")

    def commit_compose(self) -> OperationResult:
        state = self._edit_state
        if not isinstance(state, ComposingState):
            return self._invalid_state("commit_compose", "No new task is being composed.")

        self._set_state(IDLE)
        text = state.draft.strip()
        if not text:
            return OperationResult.success("commit_compose", "Empty draft discarded; no task added.")

        task = TaskModel(id=self._allocate_id(), description=text, completed=False)
        self._tasks.append(task)
        logger.info("task_added", task_id=task.id)
        return OperationResult.success("commit_compose", f"Task {task.id} added.", task.id)

    def cancel_compose(self) -> OperationResult:
        if not isinstance(self._edit_state, ComposingState):
            return self._invalid_state("cancel_compose", "No new task is being composed.")
        self._set_state(IDLE)
        return OperationResult.success("cancel_compose", "New task discarded.")

    # -------------------- edit workflow --------------------

    def begin_edit(self, task_id: int) -> OperationResult:
        busy = self._reject_if_busy("begin_edit", task_id)
        if busy:
            return busy
        task = self.get_task(task_id)
        if task is None:
            return self._not_found("begin_edit", task_id)
        self._set_state(EditingState(task_id=task_id, draft=task.description))
        return OperationResult.success("begin_edit", f"Editing task {task_id}.", task_id)

    def commit_edit(self) -> OperationResult:
        """Store the draft as the task's description, even when it is empty."""
        state = self._edit_state
        if not isinstance(state, EditingState):
            return self._invalid_state("commit_edit", "No task is being edited.")

        index = self._index_of(state.task_id)
        self._set_state(IDLE)
        if index is None:
            return self._not_found("commit_edit", state.task_id)

        self._tasks[index] = self._tasks[index].model_copy(update={"description": state.draft})
        logger.info("task_edited", task_id=state.task_id)
        return OperationResult.success("commit_edit", f"Task {state.task_id} updated.", state.task_id)

    def cancel_edit(self) -> OperationResult:
        state = self._edit_state
        if not isinstance(state, EditingState):
            return self._invalid_state("cancel_edit", "No task is being edited.")
        self._set_state(IDLE)
        return OperationResult.success("cancel_edit", f"Edit of task {state.task_id} discarded.", state.task_id)

    # -------------------- shared draft --------------------

    def update_draft(self, text: str) -> OperationResult:
        state = self._edit_state
        if isinstance(state, ComposingState):
            self._edit_state = state.model_copy(update={"draft": text})
            return OperationResult.success("update_draft", "Draft updated.")
        if isinstance(state, EditingState):
            self._edit_state = state.model_copy(update={"draft": text})
            return OperationResult.success("update_draft", "Draft updated.", state.task_id)
        return self._invalid_state("update_draft", "No draft is open; begin composing or editing first.")

    def commit_draft(self) -> OperationResult:
        """Commit whichever draft is open."""
        if isinstance(self._edit_state, EditingState):
            return self.commit_edit()
        if isinstance(self._edit_state, ComposingState):
            return self.commit_compose()
        return self._invalid_state("commit_draft", "No draft is open; nothing to commit.")

    def cancel_draft(self) -> OperationResult:
        """Discard whichever draft is open."""
        if isinstance(self._edit_state, EditingState):
            return self.cancel_edit()
        if isinstance(self._edit_state, ComposingState):
            return self.cancel_compose()
        return self._invalid_state("cancel_draft", "No draft is open; nothing to cancel.")

    # -------------------- task operations --------------------

    def toggle_complete(self, task_id: int) -> OperationResult:
        index = self._index_of(task_id)
        if index is None:
            return self._not_found("toggle_complete", task_id)
        task = self._tasks[index]
        self._tasks[index] = task.model_copy(update={"completed": not task.completed})
        label = "complete" if not task.completed else "not complete"
        logger.debug("task_toggled", task_id=task_id, completed=not task.completed)
        return OperationResult.success("toggle_complete", f"Task {task_id} marked {label}.", task_id)

    def delete(self, task_id: int) -> OperationResult:
        index = self._index_of(task_id)
        if index is None:
            return self._not_found("delete", task_id)
        del self._tasks[index]
        message = f"Task {task_id} deleted."
        state = self._edit_state
        if isinstance(state, EditingState) and state.task_id == task_id:
            self._set_state(IDLE)
            message += " Its open edit was discarded."
        logger.info("task_deleted", task_id=task_id)
        return OperationResult.success("delete", message, task_id)

    def move_task(self, task_id: int, position: int) -> OperationResult:
        """Move a task to ``position`` (0-based, clamped to the list bounds)."""
        index = self._index_of(task_id)
        if index is None:
            return self._not_found("move_task", task_id)
        task = self._tasks.pop(index)
        target = max(0, min(position, len(self._tasks)))
        self._tasks.insert(target, task)
        return OperationResult.success("move_task", f"Task {task_id} moved to position {target}.", task_id)

    # -------------------- persistence --------------------

    def save(self, path: Path) -> OperationResult:
        """Write committed tasks to ``path``. Open drafts are not saved."""
        try:
            _write_bytes(path, serialize(self._tasks, indent=self._json_indent))
        except TodoListError as e:
            logger.warning("save_failed", path=str(path), error=str(e))
            return OperationResult.failure("save", e.code, f"Could not save {path}: {e}")
        logger.info("tasks_saved", path=str(path), count=len(self._tasks))
        return OperationResult.success("save", f"Saved {len(self._tasks)} task(s) to {path}.")

    def load(self, path: Path) -> OperationResult:
        """Replace the list with the contents of ``path``.

        A successful load is authoritative: any open draft is discarded. On
        failure nothing changes.
        """
        try:
            tasks = deserialize(_read_bytes(path))
        except TodoListError as e:
            logger.warning("load_failed", path=str(path), error=str(e))
            return OperationResult.failure("load", e.code, f"Could not load {path}: {e}")

        if self._edit_state.mode != EditMode.IDLE:
            logger.info("draft_discarded_by_load", mode=self._edit_state.mode)
        self._tasks = tasks
        self._next_id = _seed_next_id(tasks)
        self._set_state(IDLE)
        logger.info("tasks_loaded", path=str(path), count=len(tasks))
        return OperationResult.success("load", f"Loaded {len(tasks)} task(s) from {path}.")

    # -------------------- internals --------------------

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _set_state(self, state: EditState) -> None:
        if state.mode != self._edit_state.mode:
            logger.debug("edit_state_changed", old=self._edit_state.mode, new=state.mode)
        self._edit_state = state

    def _reject_if_busy(self, op: str, task_id: int | None = None) -> OperationResult | None:
        state = self._edit_state
        if isinstance(state, ComposingState):
            return OperationResult.failure(
                op, ErrorCode.BUSY, "A new task is being composed; commit or cancel it first.", task_id
            )
        if isinstance(state, EditingState):
            return OperationResult.failure(
                op, ErrorCode.BUSY, f"Task {state.task_id} is being edited; commit or cancel it first.", task_id
            )
        return None

    @staticmethod
    def _not_found(op: str, task_id: int) -> OperationResult:
        return OperationResult.failure(op, ErrorCode.NOT_FOUND, f"Task {task_id} not found.", task_id)

    @staticmethod
    def _invalid_state(op: str, message: str) -> OperationResult:
        return OperationResult.failure(op, ErrorCode.INVALID_STATE, message)


def _seed_next_id(tasks: list[TaskModel]) -> int:
    return max((task.id for task in tasks), default=0) + 1
