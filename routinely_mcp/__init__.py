"""
MCP Server for Routinely.

This server tracks personal tasks, including recurring ones, and derives
motivational analytics from completion history: a day streak, a productivity
score and an activity heatmap.
"""

# Re-export core logic
from routinely_mcp.core import (
    TaskStore,
    TaskValidationError,
    compute_productivity,
    compute_streak,
    heatmap,
    is_overdue,
    next_occurrence,
    priority_breakdown,
    query_tasks,
    recompute_today,
    task_counts,
)

# Re-export enums
from routinely_mcp.enums import Grade, Priority, Recurrence, ResponseFormat, TaskFilter

# Re-export models
from routinely_mcp.models import (
    AddTaskInput,
    AppState,
    CyclePriorityInput,
    DeleteTaskInput,
    EditTaskInput,
    GetTaskInput,
    HeatmapDay,
    ListTasksInput,
    ProductivityScore,
    ScoreInput,
    StatsInput,
    StreakInput,
    StreakReport,
    StreakState,
    TaskCounts,
    TaskModel,
    ToggleResult,
    ToggleTaskInput,
)

# Re-export MCP server instance
from routinely_mcp.server import mcp
from routinely_mcp.state import AppContext, get_context, set_context

# Re-export tools
from routinely_mcp.tools import (
    routinely_add,
    routinely_cycle_priority,
    routinely_delete,
    routinely_edit,
    routinely_get,
    routinely_list,
    routinely_score,
    routinely_stats,
    routinely_streak,
    routinely_toggle,
)

# Re-export utilities (including private functions used by tests)
from routinely_mcp.utils import (
    JsonStateStorage,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_task,
    _parse_tasks,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "Priority",
    "Recurrence",
    "TaskFilter",
    "Grade",
    # State models
    "TaskModel",
    "StreakState",
    "AppState",
    "ToggleResult",
    # Input models
    "ListTasksInput",
    "AddTaskInput",
    "ToggleTaskInput",
    "CyclePriorityInput",
    "EditTaskInput",
    "DeleteTaskInput",
    "GetTaskInput",
    "StreakInput",
    "ScoreInput",
    "StatsInput",
    # Analytics models
    "TaskCounts",
    "ProductivityScore",
    "HeatmapDay",
    "StreakReport",
    # Core logic
    "TaskStore",
    "TaskValidationError",
    "next_occurrence",
    "is_overdue",
    "recompute_today",
    "compute_streak",
    "compute_productivity",
    "query_tasks",
    "task_counts",
    "priority_breakdown",
    "heatmap",
    # Persistence and context
    "JsonStateStorage",
    "AppContext",
    "get_context",
    "set_context",
    # Utility functions
    "_parse_task",
    "_parse_tasks",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    # Tools
    "routinely_list",
    "routinely_get",
    "routinely_add",
    "routinely_toggle",
    "routinely_cycle_priority",
    "routinely_edit",
    "routinely_delete",
    "routinely_streak",
    "routinely_score",
    "routinely_stats",
    # MCP server instance
    "mcp",
]
