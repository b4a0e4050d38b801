"""Application session: one controller, the current file, and pickers."""

from __future__ import annotations

from pathlib import Path

import structlog

from todolist_mcp.controller import TaskListController
from todolist_mcp.enums import ErrorCode
from todolist_mcp.models.results import OperationResult
from todolist_mcp.picker import FilePicker

logger = structlog.get_logger(__name__)


class TodoSession:
    """Wraps a :class:`TaskListController` with file selection.

    ``current_file`` is only set by a successful save or load and is offered
    to the picker as the default for the next save.

    Save and load await the picker and then run the controller's
    synchronous I/O. Nothing else touches the controller while the picker is
    pending, since all calls arrive on the same event loop. A completed load
    replaces the list outright and discards any open draft.
    """

    def __init__(
        self,
        controller: TaskListController | None = None,
        *,
        default_file_name: str = "todo_list_save.json",
    ) -> None:
        self.controller = controller if controller is not None else TaskListController()
        self.current_file: Path | None = None
        self.default_file_name = default_file_name

    async def save(self, picker: FilePicker) -> OperationResult:
        path = await picker.pick_save_path(self.current_file)
        if path is None:
            logger.debug("save_cancelled")
            return OperationResult.failure(
                "save",
                ErrorCode.CANCELLED,
                f"Save cancelled: no file chosen (e.g. '{self.default_file_name}').",
            )
        result = self.controller.save(path)
        if result.ok:
            self.current_file = path
        return result

    async def load(self, picker: FilePicker) -> OperationResult:
        path = await picker.pick_open_path()
        if path is None:
            logger.debug("load_cancelled")
            return OperationResult.failure("load", ErrorCode.CANCELLED, "Load cancelled: no file chosen.")
        result = self.controller.load(path)
        if result.ok:
            self.current_file = path
        return result
