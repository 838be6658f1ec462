"""Parser helpers for persisted Routinely records."""

from datetime import date
from typing import Any

from pydantic import NonNegativeInt, TypeAdapter

from routinely_mcp.models.task import StreakState, TaskModel

_TASK_LIST = TypeAdapter(list[TaskModel])
_HISTORY = TypeAdapter(dict[date, NonNegativeInt])


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Task record as stored (camelCase or snake_case keys)

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse the stored task list.

    Raises:
        pydantic.ValidationError: If the value is not a list of valid tasks
    """
    return _TASK_LIST.validate_python(tasks)


def _parse_history(history: dict[str, Any]) -> dict[date, int]:
    """
    Parse the stored history mapping of ``YYYY-MM-DD`` to completion counts.

    Raises:
        pydantic.ValidationError: On non-date keys or negative / non-integer counts
    """
    return _HISTORY.validate_python(history)


def _parse_streak(streak: dict[str, Any]) -> StreakState:
    return StreakState.model_validate(streak)


def _dump_tasks(tasks: list[TaskModel]) -> list[dict[str, Any]]:
    """Serialize tasks to JSON-ready dicts with camelCase keys."""
    return [t.model_dump(mode="json", by_alias=True) for t in tasks]


def _dump_history(history: dict[date, int]) -> dict[str, int]:
    return {day.isoformat(): count for day, count in sorted(history.items())}
