"""Productivity score.

A composite 0-100 score weighted across three factors:
  50% task completion rate
  30% streak progress (a 14-day streak counts as 100%)
  20% completion rate of high and urgent tasks
"""

import math
from collections.abc import Sequence

from routinely_mcp.enums import Grade
from routinely_mcp.models.analytics import ProductivityScore
from routinely_mcp.models.task import TaskModel

STREAK_TARGET_DAYS = 14

COMPLETION_WEIGHT = 0.5
STREAK_WEIGHT = 0.3
PRIORITY_WEIGHT = 0.2

# Lower bound of each grade band, best first
GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (90, Grade.A),
    (75, Grade.B),
    (60, Grade.C),
    (40, Grade.D),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (built-in round() rounds half to even)."""
    return math.floor(value + 0.5)


def percentage(part: int, whole: int, empty: int = 0) -> int:
    """Whole-number percentage of part in whole, or ``empty`` when whole is 0."""
    if whole <= 0:
        return empty
    return round_half_up(100 * part / whole)


def grade_for(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


def compute_productivity(tasks: Sequence[TaskModel], current_streak: int) -> ProductivityScore:
    """
    Score the task collection and current streak.

    Args:
        tasks: Every task in the store, done or not
        current_streak: Current streak length in days

    Returns:
        ProductivityScore with the three factor percentages, score and grade
    """
    done = sum(1 for t in tasks if t.done)
    high = [t for t in tasks if t.priority.is_high]
    high_done = sum(1 for t in high if t.done)

    completion_pct = percentage(done, len(tasks))
    streak_pct = min(100, round_half_up(100 * current_streak / STREAK_TARGET_DAYS))
    # No high-priority work at all is not penalised
    priority_pct = percentage(high_done, len(high), empty=100)

    score = round_half_up(
        completion_pct * COMPLETION_WEIGHT + streak_pct * STREAK_WEIGHT + priority_pct * PRIORITY_WEIGHT
    )
    return ProductivityScore(
        completion_pct=completion_pct,
        streak_pct=streak_pct,
        priority_pct=priority_pct,
        score=score,
        grade=grade_for(score),
    )
