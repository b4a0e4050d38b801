"""FastMCP server initialization for the todo list."""

import asyncio

import structlog
from mcp.server.fastmcp import FastMCP

from todolist_mcp.config import TodoSettings, configure_logging
from todolist_mcp.controller import TaskListController
from todolist_mcp.models.results import OperationResult
from todolist_mcp.picker import ArgumentPicker
from todolist_mcp.session import TodoSession

logger = structlog.get_logger(__name__)

# Initialize the MCP server
mcp = FastMCP("todolist_mcp")

_settings: TodoSettings | None = None
_session: TodoSession | None = None


def get_settings() -> TodoSettings:
    """Return the active settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = TodoSettings()
    return _settings


def get_session() -> TodoSession:
    """Return the session every tool call operates on."""
    global _session
    if _session is None:
        _session = reset_session()
    return _session


def reset_session(settings: TodoSettings | None = None) -> TodoSession:
    """Start over with an empty task list (and optionally new settings)."""
    global _settings, _session
    if settings is not None:
        _settings = settings
    active = get_settings()
    _session = TodoSession(
        TaskListController(json_indent=active.json_indent),
        default_file_name=active.default_file_name,
    )
    return _session


async def load_startup_file(session: TodoSession, settings: TodoSettings) -> OperationResult | None:
    """Load ``settings.startup_file`` into the session, if one is configured.

    A failed load is logged and leaves the session empty; the server still starts.
    """
    if settings.startup_file is None:
        return None
    picker = ArgumentPicker(str(settings.startup_file), settings.base_dir)
    result = await session.load(picker)
    if not result.ok:
        logger.warning("startup_load_failed", path=str(settings.startup_file), message=result.message)
    return result


def run() -> None:
    """Run the MCP server."""
    settings = TodoSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    session = reset_session(settings)
    asyncio.run(load_startup_file(session, settings))
    mcp.run()
