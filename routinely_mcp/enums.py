"""Enums for Routinely MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class Priority(str, Enum):
    """Task priority levels, declared from most to least urgent."""

    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Position in the urgency order (0 is most urgent)."""
        return PRIORITY_ORDER.index(self)

    @property
    def is_high(self) -> bool:
        return self in (Priority.URGENT, Priority.HIGH)

    def next(self) -> "Priority":
        """Next priority in the cycle, wrapping from low back to urgent."""
        return PRIORITY_ORDER[(self.rank + 1) % len(PRIORITY_ORDER)]


PRIORITY_ORDER: tuple[Priority, ...] = tuple(Priority)


class Recurrence(str, Enum):
    """Recurrence rules for repeating tasks."""

    NONE = "none"
    DAILY = "daily"
    WEEKDAYS = "weekdays"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TaskFilter(str, Enum):
    """Filter keys accepted by the task list.

    HIGH selects both high and urgent tasks; URGENT, MEDIUM and LOW match
    the priority exactly.
    """

    ALL = "all"
    ACTIVE = "active"
    DONE = "done"
    HIGH = "high"
    OVERDUE = "overdue"
    RECUR = "recur"
    URGENT = "urgent"
    MEDIUM = "medium"
    LOW = "low"


class Grade(str, Enum):
    """Letter grade derived from the productivity score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
