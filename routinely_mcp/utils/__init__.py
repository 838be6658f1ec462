"""Utility functions for Routinely MCP."""

from routinely_mcp.utils.formatters import (
    _format_score_markdown,
    _format_stats_markdown,
    _format_streak_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from routinely_mcp.utils.parsers import _parse_task, _parse_tasks
from routinely_mcp.utils.storage import JsonStateStorage

__all__ = [
    "JsonStateStorage",
    "_parse_task",
    "_parse_tasks",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    "_format_streak_markdown",
    "_format_score_markdown",
    "_format_stats_markdown",
]
