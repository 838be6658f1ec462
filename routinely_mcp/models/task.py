"""Core task and state models for Routinely MCP."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator, model_validator
from pydantic.alias_generators import to_camel

from routinely_mcp.core.dates import parse_date
from routinely_mcp.enums import Priority, Recurrence


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskModel(BaseModel):
    """Model representing a single task.

    Persisted field names are camelCase (``completedDate``, ``createdAt``);
    either spelling is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    text: str = Field(..., min_length=1)
    category: str = "Work"
    priority: Priority = Priority.MEDIUM
    recur: Recurrence = Recurrence.NONE
    due: date | None = None
    done: bool = False
    completed_date: date | None = None
    notes: str = ""
    created_at: datetime = Field(default_factory=_utcnow)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # Older records use numeric timestamp ids
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("due", "completed_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> Any:
        # Stored dates may be blank or carry a time part
        if v is None or isinstance(v, (str, date)):
            return parse_date(v)
        return v

    @model_validator(mode="after")
    def check_completion(self) -> TaskModel:
        if self.done and self.completed_date is None:
            raise ValueError("completed tasks must carry a completedDate")
        if not self.done and self.completed_date is not None:
            raise ValueError("completedDate is only allowed on completed tasks")
        return self

    @property
    def is_recurring(self) -> bool:
        return self.recur != Recurrence.NONE


class StreakState(BaseModel):
    """Current and best run of consecutive active days."""

    current: int = Field(default=0, ge=0)
    best: int = Field(default=0, ge=0)


class AppState(BaseModel):
    """Everything the application persists: tasks, history and streak."""

    tasks: list[TaskModel] = Field(default_factory=list)
    history: dict[date, NonNegativeInt] = Field(default_factory=dict)
    streak: StreakState = Field(default_factory=StreakState)


class ToggleResult(BaseModel):
    """Outcome of toggling a task's completion."""

    task: TaskModel
    spawned: TaskModel | None = None
    completed_today: int = 0
