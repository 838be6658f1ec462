"""Analytics MCP tools: streak, productivity score and task stats."""

import json

from mcp.types import ToolAnnotations

from routinely_mcp.core.dates import today as current_date
from routinely_mcp.core.history import streak_message, streak_tier
from routinely_mcp.core.query import heatmap, priority_breakdown, task_counts
from routinely_mcp.core.scoring import compute_productivity
from routinely_mcp.enums import ResponseFormat
from routinely_mcp.models.analytics import StreakReport
from routinely_mcp.models.inputs import ScoreInput, StatsInput, StreakInput
from routinely_mcp.server import mcp
from routinely_mcp.state import get_context
from routinely_mcp.utils.formatters import (
    _format_score_markdown,
    _format_stats_markdown,
    _format_streak_markdown,
)


@mcp.tool(
    name="routinely_streak",
    annotations=ToolAnnotations(
        title="Completion Streak",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_streak(params: StreakInput) -> str:
    """
    Report the current and best streak of consecutive days with a completed task.

    Also returns a heatmap of completions over the last days (14 by default).
    Today's count is recounted first, so the streak is current even on a new day.

    Args:
        params: StreakInput with optional today, days and response_format

    Returns:
        Streak, tier message and heatmap
    """
    context = get_context()
    today = params.today or current_date()
    days = params.days or context.settings.heatmap_days

    streak = context.store.refresh(today)
    context.commit()

    report = StreakReport(
        streak=streak,
        tier=streak_tier(streak.current),
        message=streak_message(streak.current),
        heatmap=heatmap(context.store.history, today, days),
    )

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(report.model_dump(mode="json"), indent=2)
    return _format_streak_markdown(report)


@mcp.tool(
    name="routinely_score",
    annotations=ToolAnnotations(
        title="Productivity Score",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_score(params: ScoreInput) -> str:
    """
    Compute the 0-100 productivity score and its letter grade.

    Weights: 50% completion rate, 30% streak progress (14 days = 100%),
    20% completion rate of high and urgent tasks (100% when there are none).

    Args:
        params: ScoreInput with optional today and response_format

    Returns:
        Score, grade and the three factor percentages
    """
    context = get_context()
    today = params.today or current_date()

    streak = context.store.refresh(today)
    context.commit()

    score = compute_productivity(context.store.tasks, streak.current)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(score.model_dump(mode="json"), indent=2)
    return _format_score_markdown(score)


@mcp.tool(
    name="routinely_stats",
    annotations=ToolAnnotations(
        title="Task Stats",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_stats(params: StatsInput) -> str:
    """
    Get task counters and the breakdown of open tasks by priority.

    USE THIS WHEN:
    - Answering "how many tasks do I have?" or "how much is overdue?"
    - You want a snapshot without the task list itself

    Args:
        params: StatsInput with optional today and response_format

    Returns:
        Total, done, pending and overdue counts, progress and per-priority open counts
    """
    tasks = get_context().store.tasks
    today = params.today or current_date()

    counts = task_counts(tasks, today)
    breakdown = priority_breakdown(tasks)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "counts": counts.model_dump(),
                "open_by_priority": {p.value: n for p, n in breakdown.items()},
            },
            indent=2,
        )
    return _format_stats_markdown(counts, breakdown)
