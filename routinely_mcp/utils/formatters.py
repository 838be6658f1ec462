"""Formatting utilities for tool output."""

from datetime import date

from routinely_mcp.core.dates import is_overdue
from routinely_mcp.core.query import next_due_hint
from routinely_mcp.enums import Priority, Recurrence
from routinely_mcp.models.analytics import ProductivityScore, StreakReport, TaskCounts
from routinely_mcp.models.task import TaskModel

PRIORITY_LABELS = {
    Priority.URGENT: "Urgent",
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}

RECUR_LABELS = {
    Recurrence.NONE: "None",
    Recurrence.DAILY: "Daily",
    Recurrence.WEEKDAYS: "Weekdays",
    Recurrence.WEEKLY: "Weekly",
    Recurrence.MONTHLY: "Monthly",
}

# Block characters for heatmap levels 0-4
HEAT_BLOCKS = (".", "▁", "▃", "▅", "█")


def _format_task_concise(task: TaskModel, today: date) -> str:
    """
    Format a single task in concise format.

    Output: "[ ] 3f2a...: Description (urgent, due:2024-12-31, Work, daily)"
    """
    check = "[x]" if task.done else "[ ]"
    text = task.text[:50]

    meta = [task.priority.value]
    if task.due:
        flag = "!" if not task.done and is_overdue(task.due, today) else ""
        meta.append(f"due:{task.due.isoformat()}{flag}")
    meta.append(task.category)
    if task.is_recurring:
        meta.append(task.recur.value)

    return f"{check} {task.id}: {text} ({', '.join(meta)})"


def _format_tasks_concise(tasks: list[TaskModel], today: date, title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | active
    [ ] 1a2b: Task one (urgent, Work)
    [ ] 3c4d: Task two (low, Home)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    for task in tasks:
        lines.append(_format_task_concise(task, today))

    return "\n".join(lines)


def _format_task_markdown(task: TaskModel, today: date) -> str:
    """Format a single task as markdown."""
    lines = []

    check = "[x]" if task.done else "[ ]"
    lines.append(f"### {check} {task.text}")
    lines.append(f"`{task.id}`")

    details = [
        f"**Priority**: {PRIORITY_LABELS[task.priority]}",
        f"**Category**: {task.category}",
    ]
    if task.is_recurring:
        details.append(f"**Repeats**: {RECUR_LABELS[task.recur]}")
    if task.due:
        if not task.done and is_overdue(task.due, today):
            details.append(f"**Overdue**: {task.due.isoformat()}")
        else:
            details.append(f"**Due**: {task.due.isoformat()}")
    if task.completed_date:
        details.append(f"**Completed**: {task.completed_date.isoformat()}")
    if next_due := next_due_hint(task, today):
        details.append(f"**Next**: {next_due.isoformat()}")

    lines.append(" | ".join(details))

    if task.notes:
        lines.append(f"**Notes:** {task.notes}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], today: date, title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks here. Add one!"

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task, today))
        lines.append("")

    return "\n".join(lines)


def _format_streak_markdown(report: StreakReport) -> str:
    streak = report.streak
    lines = [
        "# Streak",
        "",
        f"**Current**: {streak.current} day(s)",
        f"**Best**: {streak.best} day(s)",
    ]
    if report.message:
        lines.append(f"*{report.message}*")

    if report.heatmap:
        lines.extend(["", f"## Last {len(report.heatmap)} days"])
        lines.append("".join(HEAT_BLOCKS[d.level] for d in report.heatmap))
        for d in report.heatmap:
            marker = " (today)" if d.is_today else ""
            lines.append(f"- {d.day.isoformat()}: {d.count}{marker}")

    return "\n".join(lines)


def _format_score_markdown(score: ProductivityScore) -> str:
    return "\n".join(
        [
            "# Productivity Score",
            "",
            f"**Score**: {score.score} ({score.grade.value})",
            "",
            f"- Completion: {score.completion_pct}%",
            f"- Streak: {score.streak_pct}%",
            f"- High priority: {score.priority_pct}%",
        ]
    )


def _format_stats_markdown(counts: TaskCounts, breakdown: dict[Priority, int]) -> str:
    lines = [
        "# Task Stats",
        "",
        f"**Total**: {counts.total}",
        f"**Done**: {counts.done}",
        f"**Pending**: {counts.pending}",
        f"**Overdue**: {counts.overdue}",
        f"**Progress**: {counts.completion_pct}%",
        "",
        "## Open Tasks by Priority",
    ]
    for priority, count in breakdown.items():
        lines.append(f"- {PRIORITY_LABELS[priority]}: {count}")
    return "\n".join(lines)
