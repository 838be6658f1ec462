"""Task store and the analytics derived from it."""

from routinely_mcp.core.dates import is_overdue, next_occurrence, parse_date
from routinely_mcp.core.history import (
    advance_streak,
    compute_streak,
    milestone_message,
    recompute_today,
    streak_message,
    streak_tier,
)
from routinely_mcp.core.query import (
    heatmap,
    next_due_hint,
    priority_breakdown,
    query_tasks,
    task_counts,
)
from routinely_mcp.core.scoring import compute_productivity, grade_for
from routinely_mcp.core.store import TaskStore, TaskValidationError

__all__ = [
    # Dates
    "next_occurrence",
    "is_overdue",
    "parse_date",
    # History and streak
    "recompute_today",
    "compute_streak",
    "advance_streak",
    "streak_tier",
    "streak_message",
    "milestone_message",
    # Scoring
    "compute_productivity",
    "grade_for",
    # Query pipeline
    "query_tasks",
    "task_counts",
    "priority_breakdown",
    "heatmap",
    "next_due_hint",
    # Store
    "TaskStore",
    "TaskValidationError",
]
