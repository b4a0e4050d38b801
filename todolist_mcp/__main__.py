"""Entry point for ``python -m todolist_mcp``."""

from todolist_mcp.server import run

run()
