"""MCP tools for saving and loading task list files."""

from mcp.types import ToolAnnotations

from todolist_mcp.models.inputs import LoadInput, SaveInput
from todolist_mcp.picker import ArgumentPicker
from todolist_mcp.server import get_session, get_settings, mcp
from todolist_mcp.utils.formatters import _format_result


@mcp.tool(
    name="todo_save",
    annotations=ToolAnnotations(
        title="Save Task List",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_save(params: SaveInput) -> str:
    """
    Write the task list to a JSON file.

    Open drafts are not saved. The file is replaced atomically.

    Args:
        params: SaveInput with an optional path; relative paths resolve
            against the configured base directory

    Returns:
        Confirmation with the file written, or an error (no file chosen,
        unwritable path)

    Examples:
        - First save: params with path="todo_list_save.json"
        - Save again to the same file: params with no path
    """
    picker = ArgumentPicker(params.path, get_settings().base_dir)
    return _format_result(await get_session().save(picker))


@mcp.tool(
    name="todo_load",
    annotations=ToolAnnotations(
        title="Load Task List",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_load(params: LoadInput) -> str:
    """
    Replace the task list with the contents of a JSON file.

    A successful load discards any open draft. If the file is missing,
    unreadable or malformed, nothing changes.

    Args:
        params: LoadInput containing the path to read

    Returns:
        Confirmation with the number of tasks loaded, or an error
    """
    picker = ArgumentPicker(params.path, get_settings().base_dir)
    return _format_result(await get_session().load(picker))
