"""Task list filtering, sorting and aggregate counters."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, timedelta

from routinely_mcp.core.dates import is_overdue, next_occurrence
from routinely_mcp.core.dates import today as current_date
from routinely_mcp.core.scoring import percentage
from routinely_mcp.enums import PRIORITY_ORDER, Priority, TaskFilter
from routinely_mcp.models.analytics import HeatmapDay, TaskCounts
from routinely_mcp.models.task import TaskModel

HEATMAP_DAYS = 14

# Filter keys that match one priority exactly
_PRIORITY_FILTERS = {
    TaskFilter.URGENT: Priority.URGENT,
    TaskFilter.MEDIUM: Priority.MEDIUM,
    TaskFilter.LOW: Priority.LOW,
}


def matches_search(task: TaskModel, search_text: str | None) -> bool:
    if not search_text:
        return True
    return search_text.lower() in task.text.lower()


def matches_filter(task: TaskModel, task_filter: TaskFilter, today: date) -> bool:
    """Return True if the task belongs in the view selected by the filter key."""
    if task_filter == TaskFilter.ACTIVE:
        return not task.done
    if task_filter == TaskFilter.DONE:
        return task.done
    if task_filter == TaskFilter.HIGH:
        return task.priority.is_high
    if task_filter == TaskFilter.OVERDUE:
        return not task.done and is_overdue(task.due, today)
    if task_filter == TaskFilter.RECUR:
        return task.is_recurring
    if task_filter in _PRIORITY_FILTERS:
        return task.priority == _PRIORITY_FILTERS[task_filter]
    return True


def sort_tasks(tasks: Iterable[TaskModel]) -> list[TaskModel]:
    """Incomplete tasks first, then by priority; ties keep collection order."""
    return sorted(tasks, key=lambda t: (t.done, t.priority.rank))


def query_tasks(
    tasks: Iterable[TaskModel],
    task_filter: TaskFilter = TaskFilter.ALL,
    search_text: str | None = None,
    today: date | None = None,
) -> list[TaskModel]:
    """
    Produce the ordered task list for a view.

    The text search applies regardless of the filter key. The result is
    stably sorted: incomplete before complete, urgent before low.

    Args:
        tasks: Task collection in store order (most recent first)
        task_filter: View to select
        search_text: Case-insensitive substring to look for in task text
        today: Date used for the overdue check

    Returns:
        Filtered and ordered list of tasks
    """
    task_filter = TaskFilter(task_filter)
    today = today or current_date()
    selected = [t for t in tasks if matches_search(t, search_text) and matches_filter(t, task_filter, today)]
    return sort_tasks(selected)


def task_counts(tasks: Sequence[TaskModel], today: date) -> TaskCounts:
    total = len(tasks)
    done = sum(1 for t in tasks if t.done)
    overdue = sum(1 for t in tasks if not t.done and is_overdue(t.due, today))
    return TaskCounts(
        total=total,
        done=done,
        pending=total - done,
        overdue=overdue,
        completion_pct=percentage(done, total),
    )


def priority_breakdown(tasks: Iterable[TaskModel]) -> dict[Priority, int]:
    """Count incomplete tasks per priority, in urgency order."""
    counts = {p: 0 for p in PRIORITY_ORDER}
    for task in tasks:
        if not task.done:
            counts[task.priority] += 1
    return counts


def heat_level(count: int, peak: int) -> int:
    """Intensity 0-4 of a day relative to the busiest day in the window."""
    if count <= 0:
        return 0
    if count >= peak:
        return 4
    if count >= peak * 0.7:
        return 3
    if count >= peak * 0.4:
        return 2
    return 1


def heatmap(history: Mapping[date, int], today: date, days: int = HEATMAP_DAYS) -> list[HeatmapDay]:
    """
    Per-day completion counts for the last ``days`` days, oldest first.

    Levels are relative to the busiest day in the window (at least 1).
    """
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    peak = max([history.get(d, 0) for d in window] + [1])
    return [
        HeatmapDay(
            day=d,
            count=history.get(d, 0),
            level=heat_level(history.get(d, 0), peak),
            is_today=d == today,
        )
        for d in window
    ]


def next_due_hint(task: TaskModel, today: date) -> date | None:
    """Next occurrence to display for a completed recurring task."""
    if not (task.done and task.is_recurring):
        return None
    return next_occurrence(task.due, task.recur, today)
