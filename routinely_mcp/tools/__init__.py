"""MCP tool definitions for Routinely."""

# Import all tools to register them with the MCP server
from routinely_mcp.tools.analytics import routinely_score, routinely_stats, routinely_streak
from routinely_mcp.tools.core import (
    routinely_add,
    routinely_cycle_priority,
    routinely_delete,
    routinely_edit,
    routinely_get,
    routinely_list,
    routinely_toggle,
)

__all__ = [
    # Task tools
    "routinely_list",
    "routinely_get",
    "routinely_add",
    "routinely_toggle",
    "routinely_cycle_priority",
    "routinely_edit",
    "routinely_delete",
    # Analytics tools
    "routinely_streak",
    "routinely_score",
    "routinely_stats",
]
