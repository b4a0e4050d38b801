"""Pytest configuration and fixtures for todolist-mcp tests."""

import json

import pytest

from todolist_mcp import TaskListController, TaskModel, reset_session
from todolist_mcp.config import TodoSettings


@pytest.fixture
def controller():
    """An empty controller."""
    return TaskListController()


@pytest.fixture
def sample_tasks():
    """Two tasks, the second already completed."""
    return [
        TaskModel(id=1, description="A", completed=False),
        TaskModel(id=2, description="B", completed=True),
    ]


@pytest.fixture
def populated_controller(sample_tasks):
    """A controller holding the sample tasks."""
    return TaskListController(sample_tasks)


@pytest.fixture
def task_file(tmp_path, sample_tasks):
    """A well-formed task file holding the sample tasks."""
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([t.model_dump() for t in sample_tasks]), encoding="utf-8")
    return path


@pytest.fixture
def malformed_file(tmp_path):
    """A task file whose second record is missing its completed flag."""
    path = tmp_path / "broken.json"
    path.write_text('[{"id": 1, "description": "ok", "completed": false}, {"id": 2, "description": "no flag"}]')
    return path


@pytest.fixture
def fresh_session(tmp_path):
    """Reset the server session to an empty list rooted at tmp_path."""
    return reset_session(TodoSettings(base_dir=tmp_path))
