"""Output models for the analytics derived from tasks and history."""

from datetime import date

from pydantic import BaseModel, Field

from routinely_mcp.enums import Grade
from routinely_mcp.models.task import StreakState


class TaskCounts(BaseModel):
    """Headline counters for the whole task collection."""

    total: int = 0
    done: int = 0
    pending: int = 0
    overdue: int = 0
    completion_pct: int = 0


class ProductivityScore(BaseModel):
    """Composite 0-100 score and the three factors it is built from."""

    completion_pct: int
    streak_pct: int
    priority_pct: int
    score: int
    grade: Grade


class HeatmapDay(BaseModel):
    """One day of the completion heatmap."""

    day: date
    count: int
    level: int = Field(ge=0, le=4)
    is_today: bool = False


class StreakReport(BaseModel):
    """Streak state together with its tier and recent activity."""

    streak: StreakState
    tier: int
    message: str
    heatmap: list[HeatmapDay] = Field(default_factory=list)
