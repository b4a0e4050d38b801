"""Tests for the task list controller state machine."""

import json
from unittest.mock import patch

import pytest

from todolist_mcp import (
    IDLE,
    ComposingState,
    EditingState,
    EditMode,
    ErrorCode,
    TaskListController,
    TaskModel,
)

# ============================================================================
# Compose Workflow
# ============================================================================


class TestCompose:
    """Tests for begin_compose / update_draft / commit_compose / cancel_compose."""

    def test_begin_compose_opens_empty_draft(self, controller):
        """Test that begin_compose moves from idle to an empty compose draft."""
        result = controller.begin_compose()
        assert result.ok
        assert controller.edit_state == ComposingState(draft="")

    def test_update_draft_replaces_text(self, controller):
        """Test that update_draft replaces rather than appends."""
        controller.begin_compose()
        controller.update_draft("Buy")
        controller.update_draft("Buy milk")
        assert controller.edit_state == ComposingState(draft="Buy milk")

    def test_commit_appends_task(self, controller):
        """Test that committing a draft appends a new incomplete task."""
        controller.begin_compose()
        controller.update_draft("Buy milk")
        result = controller.commit_compose()

        assert result.ok
        assert result.task_id == 1
        assert controller.tasks == (TaskModel(id=1, description="Buy milk", completed=False),)
        assert controller.edit_state == IDLE

    def test_commit_appends_at_end(self, populated_controller):
        """Test that new tasks go after existing ones."""
        populated_controller.begin_compose()
        populated_controller.update_draft("C")
        populated_controller.commit_compose()
        assert [t.description for t in populated_controller.tasks] == ["A", "B", "C"]

    def test_commit_trims_description(self, controller):
        """Test that surrounding whitespace is dropped from new tasks."""
        controller.begin_compose()
        controller.update_draft("  Call mom \n")
        controller.commit_compose()
        assert controller.tasks[0].description == "Call mom"

    @pytest.mark.parametrize("draft", ["", "   ", "\n\t"])
    def test_commit_blank_draft_adds_nothing(self, controller, draft):
        """Test that a blank draft is discarded without adding a task."""
        controller.begin_compose()
        controller.update_draft(draft)
        result = controller.commit_compose()

        assert result.ok
        assert result.task_id is None
        assert len(controller) == 0
        assert controller.edit_state == IDLE

    def test_blank_commit_does_not_consume_id(self, controller):
        """Test that the id counter only advances when a task is added."""
        controller.begin_compose()
        controller.commit_compose()
        assert controller.next_id == 1

    def test_cancel_compose_discards_draft(self, controller):
        """Test that cancelling leaves the list untouched."""
        controller.begin_compose()
        controller.update_draft("Never mind")
        result = controller.cancel_compose()

        assert result.ok
        assert len(controller) == 0
        assert controller.edit_state == IDLE

    def test_commit_without_draft_is_invalid(self, controller):
        """Test that commit_compose while idle is rejected."""
        result = controller.commit_compose()
        assert not result.ok
        assert result.error == ErrorCode.INVALID_STATE

    def test_cancel_without_draft_is_invalid(self, controller):
        """Test that cancel_compose while idle is rejected."""
        result = controller.cancel_compose()
        assert result.error == ErrorCode.INVALID_STATE

    def test_update_draft_while_idle_is_invalid(self, controller):
        """Test that there is nothing to update while idle."""
        result = controller.update_draft("text")
        assert result.error == ErrorCode.INVALID_STATE
        assert controller.edit_state == IDLE


# ============================================================================
# Edit Workflow
# ============================================================================


class TestEdit:
    """Tests for begin_edit / commit_edit / cancel_edit."""

    def test_begin_edit_seeds_draft_with_description(self, populated_controller):
        """Test that the draft starts as the current description."""
        result = populated_controller.begin_edit(2)
        assert result.ok
        assert result.task_id == 2
        assert populated_controller.edit_state == EditingState(task_id=2, draft="B")

    def test_begin_edit_unknown_id(self, populated_controller):
        """Test that editing a missing task reports not found and stays idle."""
        result = populated_controller.begin_edit(99)
        assert result.error == ErrorCode.NOT_FOUND
        assert result.task_id == 99
        assert populated_controller.edit_state == IDLE

    def test_commit_edit_updates_description(self, populated_controller):
        """Test that committing stores the draft and keeps other fields."""
        populated_controller.begin_edit(2)
        populated_controller.update_draft("B2")
        result = populated_controller.commit_edit()

        assert result.ok
        assert populated_controller.get_task(2) == TaskModel(id=2, description="B2", completed=True)
        assert populated_controller.edit_state == IDLE

    def test_commit_edit_allows_empty_text(self, populated_controller):
        """Test that an edit commit stores an empty description as-is."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("")
        populated_controller.commit_edit()
        assert populated_controller.get_task(1).description == ""
        assert len(populated_controller) == 2

    def test_commit_edit_keeps_whitespace(self, populated_controller):
        """Test that edit commits are not trimmed."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("  A  ")
        populated_controller.commit_edit()
        assert populated_controller.get_task(1).description == "  A  "

    def test_cancel_edit_keeps_original(self, populated_controller):
        """Test that cancelling an edit leaves the description unchanged."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("changed")
        result = populated_controller.cancel_edit()

        assert result.ok
        assert populated_controller.get_task(1).description == "A"
        assert populated_controller.edit_state == IDLE

    def test_commit_edit_while_composing_is_invalid(self, controller):
        """Test that commit_edit does not commit a compose draft."""
        controller.begin_compose()
        controller.update_draft("new")
        result = controller.commit_edit()

        assert result.error == ErrorCode.INVALID_STATE
        assert controller.edit_state == ComposingState(draft="new")

    def test_commit_compose_while_editing_is_invalid(self, populated_controller):
        """Test that commit_compose does not commit an edit draft."""
        populated_controller.begin_edit(1)
        result = populated_controller.commit_compose()

        assert result.error == ErrorCode.INVALID_STATE
        assert populated_controller.edit_state.mode == EditMode.EDITING
        assert len(populated_controller) == 2


# ============================================================================
# Single Draft
# ============================================================================


class TestDraftDispatch:
    """Tests for commit_draft and cancel_draft."""

    def test_commit_draft_while_idle(self, controller):
        """Test that committing with nothing open says so."""
        result = controller.commit_draft()
        assert result.error == ErrorCode.INVALID_STATE
        assert result.message == "No draft is open; nothing to commit."

    def test_cancel_draft_while_idle(self, controller):
        """Test that cancelling with nothing open says so."""
        result = controller.cancel_draft()
        assert result.error == ErrorCode.INVALID_STATE
        assert result.message == "No draft is open; nothing to cancel."

    def test_commit_draft_routes_to_compose(self, controller):
        """Test that an open compose draft is committed as a new task."""
        controller.begin_compose()
        controller.update_draft("New")
        result = controller.commit_draft()
        assert result.op == "commit_compose"
        assert controller.tasks == (TaskModel(id=1, description="New", completed=False),)

    def test_commit_draft_routes_to_edit(self, populated_controller):
        """Test that an open edit draft is committed to its task."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("")
        result = populated_controller.commit_draft()
        assert result.op == "commit_edit"
        assert populated_controller.get_task(1).description == ""

    def test_cancel_draft_routes_to_edit(self, populated_controller):
        """Test that cancelling an edit keeps the description."""
        populated_controller.begin_edit(2)
        populated_controller.update_draft("x")
        assert populated_controller.cancel_draft().op == "cancel_edit"
        assert populated_controller.get_task(2).description == "B"
        assert populated_controller.edit_state == IDLE


class TestSingleDraft:
    """Tests that at most one draft is open at a time."""

    def test_begin_compose_while_editing_is_busy(self, populated_controller):
        """Test that composing is rejected while an edit is open."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("unsaved")
        result = populated_controller.begin_compose()

        assert result.error == ErrorCode.BUSY
        assert populated_controller.edit_state == EditingState(task_id=1, draft="unsaved")

    def test_begin_edit_while_composing_is_busy(self, populated_controller):
        """Test that editing is rejected while a compose draft is open."""
        populated_controller.begin_compose()
        populated_controller.update_draft("unsaved")
        result = populated_controller.begin_edit(1)

        assert result.error == ErrorCode.BUSY
        assert populated_controller.edit_state == ComposingState(draft="unsaved")

    def test_begin_edit_while_editing_is_busy(self, populated_controller):
        """Test that a second edit does not replace the first draft."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("first")
        result = populated_controller.begin_edit(2)

        assert result.error == ErrorCode.BUSY
        assert populated_controller.edit_state == EditingState(task_id=1, draft="first")

    def test_begin_compose_while_composing_is_busy(self, controller):
        """Test that reopening compose keeps the existing draft."""
        controller.begin_compose()
        controller.update_draft("keep me")
        result = controller.begin_compose()

        assert result.error == ErrorCode.BUSY
        assert controller.edit_state == ComposingState(draft="keep me")

    def test_busy_takes_precedence_over_not_found(self, controller):
        """Test that begin_edit reports busy even for an unknown id."""
        controller.begin_compose()
        assert controller.begin_edit(42).error == ErrorCode.BUSY


# ============================================================================
# Toggle / Delete / Move
# ============================================================================


class TestTaskOperations:
    """Tests for toggle_complete, delete and move_task."""

    def test_toggle_flips_flag(self, populated_controller):
        """Test toggling a task twice returns it to its original state."""
        assert populated_controller.toggle_complete(1).ok
        assert populated_controller.get_task(1).completed is True
        populated_controller.toggle_complete(1)
        assert populated_controller.get_task(1).completed is False

    def test_toggle_unknown_id(self, populated_controller):
        """Test toggling a missing task is a reported no-op."""
        before = populated_controller.tasks
        result = populated_controller.toggle_complete(99)
        assert result.error == ErrorCode.NOT_FOUND
        assert populated_controller.tasks == before

    def test_toggle_during_edit_keeps_draft(self, populated_controller):
        """Test that toggling is independent of the edit state."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("draft")
        populated_controller.toggle_complete(1)

        assert populated_controller.get_task(1).completed is True
        assert populated_controller.edit_state == EditingState(task_id=1, draft="draft")

    def test_toggle_then_commit_edit_keeps_flag(self, populated_controller):
        """Test that an edit commit does not undo a toggle made meanwhile."""
        populated_controller.begin_edit(1)
        populated_controller.toggle_complete(1)
        populated_controller.update_draft("A2")
        populated_controller.commit_edit()
        assert populated_controller.get_task(1) == TaskModel(id=1, description="A2", completed=True)

    def test_delete_removes_task(self, populated_controller):
        """Test deleting a task keeps the order of the rest."""
        result = populated_controller.delete(1)
        assert result.ok
        assert result.task_id == 1
        assert [t.id for t in populated_controller.tasks] == [2]

    def test_delete_unknown_id(self, populated_controller):
        """Test deleting a missing task is a reported no-op."""
        result = populated_controller.delete(99)
        assert result.error == ErrorCode.NOT_FOUND
        assert len(populated_controller) == 2

    def test_delete_task_being_edited_resets_state(self, populated_controller):
        """Test that deleting the edit target discards the edit."""
        populated_controller.begin_edit(2)
        populated_controller.update_draft("doomed")
        populated_controller.delete(2)

        assert populated_controller.edit_state == IDLE
        assert populated_controller.get_task(2) is None
        assert populated_controller.commit_edit().error == ErrorCode.INVALID_STATE
        assert populated_controller.get_task(2) is None

    def test_delete_other_task_keeps_edit(self, populated_controller):
        """Test that deleting a different task leaves the edit open."""
        populated_controller.begin_edit(2)
        populated_controller.delete(1)
        assert populated_controller.edit_state == EditingState(task_id=2, draft="B")

    def test_delete_while_composing_keeps_draft(self, populated_controller):
        """Test that deleting does not touch a compose draft."""
        populated_controller.begin_compose()
        populated_controller.update_draft("new")
        populated_controller.delete(1)
        assert populated_controller.edit_state == ComposingState(draft="new")

    def test_move_task_to_front(self):
        """Test moving a task to position 0."""
        controller = TaskListController(
            [TaskModel(id=i, description=str(i), completed=False) for i in (1, 2, 3)]
        )
        result = controller.move_task(3, 0)
        assert result.ok
        assert [t.id for t in controller.tasks] == [3, 1, 2]

    def test_move_task_clamps_position(self):
        """Test that out-of-range positions clamp to the ends."""
        controller = TaskListController(
            [TaskModel(id=i, description=str(i), completed=False) for i in (1, 2, 3)]
        )
        controller.move_task(1, 100)
        assert [t.id for t in controller.tasks] == [2, 3, 1]
        controller.move_task(1, -5)
        assert [t.id for t in controller.tasks] == [1, 2, 3]

    def test_move_unknown_id(self, populated_controller):
        """Test moving a missing task is a reported no-op."""
        assert populated_controller.move_task(99, 0).error == ErrorCode.NOT_FOUND

    def test_tasks_accessor_is_a_snapshot(self, populated_controller):
        """Test that the tasks accessor cannot be used to mutate the list."""
        snapshot = populated_controller.tasks
        populated_controller.delete(1)
        assert len(snapshot) == 2
        assert isinstance(snapshot, tuple)


# ============================================================================
# Id Allocation
# ============================================================================


class TestIdAllocation:
    """Tests for monotonic, never-reused ids."""

    def _add(self, controller, text):
        controller.begin_compose()
        controller.update_draft(text)
        return controller.commit_compose().task_id

    def test_ids_are_sequential(self, controller):
        """Test that ids start at 1 and increase."""
        assert [self._add(controller, t) for t in "abc"] == [1, 2, 3]

    def test_deleted_ids_are_not_reused(self, controller):
        """Test that deleting the newest task does not free its id."""
        self._add(controller, "a")
        last = self._add(controller, "b")
        controller.delete(last)
        assert self._add(controller, "c") == 3

    def test_ids_unique_after_mixed_operations(self, controller, task_file):
        """Test pairwise-distinct ids after adds, deletes and a load."""
        for text in "abcd":
            self._add(controller, text)
        controller.delete(2)
        controller.delete(4)
        controller.load(task_file)
        for text in "xyz":
            self._add(controller, text)
        controller.delete(1)

        ids = [t.id for t in controller.tasks]
        assert len(ids) == len(set(ids))

    def test_initial_tasks_seed_counter(self):
        """Test that a controller built from tasks continues after the max id."""
        controller = TaskListController([TaskModel(id=7, description="x", completed=False)])
        assert controller.next_id == 8


# ============================================================================
# Save / Load
# ============================================================================


class TestPersistence:
    """Tests for controller save and load."""

    def test_save_writes_json(self, populated_controller, tmp_path):
        """Test that save writes every task in order."""
        path = tmp_path / "out.json"
        result = populated_controller.save(path)

        assert result.ok
        assert json.loads(path.read_text()) == [
            {"id": 1, "description": "A", "completed": False},
            {"id": 2, "description": "B", "completed": True},
        ]

    def test_save_then_load_in_fresh_controller(self, populated_controller, tmp_path):
        """Test the save/load round trip and the id that follows it."""
        path = tmp_path / "P.json"
        populated_controller.save(path)

        fresh = TaskListController()
        assert fresh.load(path).ok
        assert fresh.tasks == populated_controller.tasks

        fresh.begin_compose()
        fresh.update_draft("C")
        assert fresh.commit_compose().task_id == 3

    def test_save_excludes_open_draft(self, populated_controller, tmp_path):
        """Test that an uncommitted edit is not written and stays open."""
        path = tmp_path / "out.json"
        populated_controller.begin_edit(1)
        populated_controller.update_draft("unsaved")
        assert populated_controller.save(path).ok

        assert json.loads(path.read_text())[0]["description"] == "A"
        assert populated_controller.edit_state == EditingState(task_id=1, draft="unsaved")

    def test_save_to_missing_directory(self, populated_controller, tmp_path):
        """Test that a write failure is an I/O error and changes nothing."""
        before = populated_controller.tasks
        result = populated_controller.save(tmp_path / "nope" / "out.json")

        assert result.error == ErrorCode.IO_ERROR
        assert populated_controller.tasks == before

    def test_save_disk_full(self, populated_controller, tmp_path):
        """Test that a failed save leaves the previous file intact."""
        path = tmp_path / "out.json"
        path.write_text("previous")
        with patch("todolist_mcp.utils.files.os.replace", side_effect=OSError(28, "No space left on device")):
            result = populated_controller.save(path)

        assert result.error == ErrorCode.IO_ERROR
        assert "No space left on device" in result.message
        assert path.read_text() == "previous"
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_load_replaces_list(self, populated_controller, tmp_path):
        """Test that load discards the previous contents."""
        path = tmp_path / "other.json"
        path.write_text('[{"id": 10, "description": "Z", "completed": false}]')
        result = populated_controller.load(path)

        assert result.ok
        assert populated_controller.tasks == (TaskModel(id=10, description="Z", completed=False),)
        assert populated_controller.next_id == 11

    def test_load_empty_list_resets_counter(self, populated_controller, tmp_path):
        """Test that loading an empty list restarts ids at 1."""
        path = tmp_path / "empty.json"
        path.write_text("[]")
        populated_controller.load(path)
        assert len(populated_controller) == 0
        assert populated_controller.next_id == 1

    def test_load_malformed_keeps_state(self, populated_controller, malformed_file):
        """Test that a decode error leaves the list and draft untouched."""
        populated_controller.begin_compose()
        populated_controller.update_draft("keep")
        before = populated_controller.tasks

        result = populated_controller.load(malformed_file)

        assert not result.ok
        assert result.error == ErrorCode.DECODE_ERROR
        assert populated_controller.tasks == before
        assert populated_controller.edit_state == ComposingState(draft="keep")
        assert populated_controller.next_id == 3

    def test_load_missing_file(self, populated_controller, tmp_path):
        """Test that a missing file is an I/O error, not a decode error."""
        result = populated_controller.load(tmp_path / "missing.json")
        assert result.error == ErrorCode.IO_ERROR
        assert len(populated_controller) == 2

    def test_load_discards_open_edit(self, populated_controller, task_file):
        """Test that a successful load wins over an open draft."""
        populated_controller.begin_edit(1)
        populated_controller.update_draft("lost")
        assert populated_controller.load(task_file).ok
        assert populated_controller.edit_state == IDLE
        assert populated_controller.get_task(1).description == "A"


# ============================================================================
# Scenario
# ============================================================================


class TestScenario:
    """End-to-end walk through the controller."""

    def test_buy_milk(self, controller):
        """Test compose, toggle, edit and delete of a single task."""
        controller.begin_compose()
        controller.update_draft("Buy milk")
        controller.commit_compose()
        assert controller.tasks == (TaskModel(id=1, description="Buy milk", completed=False),)

        controller.toggle_complete(1)
        assert controller.tasks == (TaskModel(id=1, description="Buy milk", completed=True),)

        controller.begin_edit(1)
        controller.update_draft("Buy oat milk")
        controller.commit_edit()
        assert controller.tasks == (TaskModel(id=1, description="Buy oat milk", completed=True),)

        controller.delete(1)
        assert controller.tasks == ()
