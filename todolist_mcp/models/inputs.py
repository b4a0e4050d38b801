"""Input models for the todo list MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todolist_mcp.enums import ResponseFormat

# ============================================================================
# Read Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing the task list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    include_completed: bool = Field(default=True, description="Include tasks already marked complete")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    task_id: int = Field(..., description="Id of the task to retrieve", ge=0)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' or 'json'",
    )


class StateInput(BaseModel):
    """Input model for inspecting the current edit state."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' or 'json'",
    )


# ============================================================================
# Draft Workflow Input Models
# ============================================================================


class UpdateDraftInput(BaseModel):
    """Input model for replacing the open draft's text.

    Whitespace is kept as typed; trimming happens when a new task is committed.
    """

    text: str = Field(..., description="Full replacement text for the open draft", max_length=10000)


class BeginEditInput(BaseModel):
    """Input model for opening an existing task for editing."""

    task_id: int = Field(..., description="Id of the task to edit", ge=0)


class AddTaskInput(BaseModel):
    """Input model for adding a task in a single step."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(..., description="Task description (required)", min_length=1, max_length=10000)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Description cannot be empty")
        return v.strip()


# ============================================================================
# Task Mutation Input Models
# ============================================================================


class ToggleCompleteInput(BaseModel):
    """Input model for flipping a task's completed flag."""

    task_id: int = Field(..., description="Id of the task to toggle", ge=0)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    task_id: int = Field(..., description="Id of the task to delete", ge=0)


class MoveTaskInput(BaseModel):
    """Input model for moving a task to another position."""

    task_id: int = Field(..., description="Id of the task to move", ge=0)
    position: int = Field(
        ...,
        description="Target 0-based position; values past either end are clamped",
    )


# ============================================================================
# Persistence Input Models
# ============================================================================


class SaveInput(BaseModel):
    """Input model for saving the task list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    path: str | None = Field(
        default=None,
        description="File to write; omit to reuse the file last saved or loaded",
    )


class LoadInput(BaseModel):
    """Input model for loading a task list file."""

    model_config = ConfigDict(str_strip_whitespace=True)

    path: str | None = Field(default=None, description="File to read (required unless a picker supplies one)")
