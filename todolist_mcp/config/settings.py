"""Server settings from ``TODOLIST_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs  — used by tests and embedding code
  2. Env vars     — ``TODOLIST_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TodoSettings(BaseSettings):
    """Settings for the todo list server.

    Attributes:
        base_dir: Directory that relative save/load paths resolve against.
        default_file_name: File name suggested when a save has no target.
        startup_file: Task list loaded when the server starts, if set.
        json_indent: Indent for saved files; 0 writes compact JSON.
        verbose: Enable DEBUG-level logging.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = SettingsConfigDict(env_prefix="TODOLIST_", frozen=True)

    base_dir: Path = Field(default_factory=Path.cwd)
    default_file_name: str = "todo_list_save.json"
    startup_file: Path | None = None
    json_indent: int = Field(default=2, ge=0, le=8)
    verbose: bool = False
    log_json: bool = False
