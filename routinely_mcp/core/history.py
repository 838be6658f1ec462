"""Completion history and streak calculation.

History maps a calendar date to the number of tasks completed on that date.
Today's entry is always recounted from the task collection rather than
incremented, so the two never drift apart.
"""

from collections.abc import Iterable, Mapping, MutableMapping
from datetime import date, timedelta

from routinely_mcp.models.task import StreakState, TaskModel

DEFAULT_LOOKBACK_DAYS = 365

STREAK_MESSAGES = (
    "",
    "You're on a roll!",
    "Momentum is building!",
    "You're unstoppable!",
    "Legendary streak!",
)

MILESTONE_MESSAGES = {
    5: "5 tasks done today - great work!",
    10: "10 tasks done! You're crushing it!",
}


def count_completed_on(tasks: Iterable[TaskModel], day: date) -> int:
    """Count tasks that are done and were completed on the given day."""
    return sum(1 for t in tasks if t.done and t.completed_date == day)


def recompute_today(tasks: Iterable[TaskModel], history: MutableMapping[date, int], today: date) -> int:
    """
    Overwrite today's history entry with a fresh recount.

    Safe to call any number of times; only the entry for ``today`` is touched.

    Returns:
        The number of tasks completed today
    """
    count = count_completed_on(tasks, today)
    history[today] = count
    return count


def compute_streak(
    history: Mapping[date, int],
    today: date,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> int:
    """
    Count consecutive active days ending today.

    A day is active when its history entry exists and is positive. The walk
    starts at today (inclusive) and stops at the first inactive day or after
    ``lookback_days`` steps. An inactive today yields 0.
    """
    streak = 0
    cursor = today
    for _ in range(lookback_days):
        if history.get(cursor, 0) <= 0:
            break
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def advance_streak(previous: StreakState, current: int) -> StreakState:
    """Return the new streak state; the best run never decreases."""
    return StreakState(current=current, best=max(previous.best, current))


def streak_tier(current: int) -> int:
    """Bucket a streak length: 0 none, 1 for 1-2 days, 2 for 3-6, 3 for 7-13, 4 for 14+."""
    if current <= 0:
        return 0
    if current < 3:
        return 1
    if current < 7:
        return 2
    if current < 14:
        return 3
    return 4


def streak_message(current: int) -> str:
    return STREAK_MESSAGES[streak_tier(current)]


def milestone_message(completed_today: int) -> str | None:
    """Celebration message when today's completions hit a milestone."""
    return MILESTONE_MESSAGES.get(completed_today)
