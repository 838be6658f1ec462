"""Pydantic models for Routinely MCP."""

from routinely_mcp.models.analytics import HeatmapDay, ProductivityScore, StreakReport, TaskCounts
from routinely_mcp.models.inputs import (
    AddTaskInput,
    CyclePriorityInput,
    DeleteTaskInput,
    EditTaskInput,
    GetTaskInput,
    ListTasksInput,
    ScoreInput,
    StatsInput,
    StreakInput,
    ToggleTaskInput,
)
from routinely_mcp.models.task import AppState, StreakState, TaskModel, ToggleResult

__all__ = [
    # State models
    "TaskModel",
    "StreakState",
    "AppState",
    "ToggleResult",
    # Task tool input models
    "ListTasksInput",
    "AddTaskInput",
    "ToggleTaskInput",
    "CyclePriorityInput",
    "EditTaskInput",
    "DeleteTaskInput",
    "GetTaskInput",
    # Analytics input models
    "StreakInput",
    "ScoreInput",
    "StatsInput",
    # Analytics output models
    "TaskCounts",
    "ProductivityScore",
    "HeatmapDay",
    "StreakReport",
]
