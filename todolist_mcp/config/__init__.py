"""Configuration and logging setup."""

from todolist_mcp.config.logging import configure_logging
from todolist_mcp.config.settings import TodoSettings

__all__ = ["TodoSettings", "configure_logging"]
