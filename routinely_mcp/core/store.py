"""In-memory task store.

The store owns the whole AppState (tasks, history and streak) and is the only
place that mutates it. Every public mutator runs under a single lock and
leaves tasks, today's history entry and the streak consistent with each other
before returning.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import date, datetime, timezone

from routinely_mcp.core.dates import next_occurrence
from routinely_mcp.core.dates import today as current_date
from routinely_mcp.core.history import (
    DEFAULT_LOOKBACK_DAYS,
    advance_streak,
    compute_streak,
    recompute_today,
)
from routinely_mcp.enums import Priority, Recurrence
from routinely_mcp.models.task import AppState, StreakState, TaskModel, ToggleResult

logger = logging.getLogger(__name__)


class TaskValidationError(ValueError):
    """Raised when a task cannot be created from the given fields."""


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """
    Task collection plus derived completion history and streak.

    Tasks are kept most-recent-first: new tasks go to the front, recurrence
    clones to the back. Operations on unknown ids are silent no-ops that
    return None (or False for delete).
    """

    def __init__(
        self,
        state: AppState | None = None,
        *,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._state = state if state is not None else AppState()
        self._lookback_days = lookback_days
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()

    # ---- read access ----

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def tasks(self) -> list[TaskModel]:
        with self._lock:
            return list(self._state.tasks)

    @property
    def history(self) -> dict[date, int]:
        with self._lock:
            return dict(self._state.history)

    @property
    def streak(self) -> StreakState:
        with self._lock:
            return self._state.streak.model_copy()

    def get_task(self, task_id: str) -> TaskModel | None:
        with self._lock:
            return self._find(task_id)

    def snapshot(self) -> AppState:
        """Deep copy of the full state, safe to serialize outside the lock."""
        with self._lock:
            return self._state.model_copy(deep=True)

    def _find(self, task_id: str) -> TaskModel | None:
        for task in self._state.tasks:
            if task.id == task_id:
                return task
        return None

    # ---- derived state ----

    def refresh(self, today: date | None = None) -> StreakState:
        """
        Recount today's history entry and recompute the streak.

        Called after every completion change, and by readers that need the
        streak for a new day.
        """
        today = today or current_date()
        with self._lock:
            recompute_today(self._state.tasks, self._state.history, today)
            current = compute_streak(self._state.history, today, self._lookback_days)
            self._state.streak = advance_streak(self._state.streak, current)
            return self._state.streak.model_copy()

    # ---- mutations ----

    def add_task(
        self,
        text: str,
        category: str = "Work",
        priority: Priority = Priority.MEDIUM,
        recur: Recurrence = Recurrence.NONE,
        due: date | None = None,
        notes: str = "",
        today: date | None = None,
    ) -> TaskModel:
        """
        Create a task and insert it at the front of the collection.

        Raises:
            TaskValidationError: If the text is empty after trimming
        """
        text = (text or "").strip()
        if not text:
            raise TaskValidationError("Task text cannot be empty")

        task = TaskModel(
            id=self._id_factory(),
            text=text,
            category=category,
            priority=Priority(priority),
            recur=Recurrence(recur),
            due=due,
            notes=notes or "",
            created_at=self._clock(),
        )
        with self._lock:
            self._state.tasks.insert(0, task)
            self.refresh(today)
        logger.debug("Task added id=%s priority=%s recur=%s due=%s", task.id, task.priority.value, task.recur.value, due)
        return task

    def toggle_done(self, task_id: str, today: date | None = None) -> ToggleResult | None:
        """
        Flip a task between done and not done.

        Completing a recurring task appends a fresh copy due on the next
        occurrence. The original keeps its id, text, category and due date.
        """
        today = today or current_date()
        with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug("Toggle ignored, task not found id=%s", task_id)
                return None

            completing = not task.done
            spawned = None
            if completing and task.is_recurring:
                spawned = task.model_copy(
                    update={
                        "id": self._id_factory(),
                        "done": False,
                        "completed_date": None,
                        "due": next_occurrence(task.due, task.recur, today),
                        "created_at": self._clock(),
                    }
                )

            task.done = completing
            task.completed_date = today if completing else None
            if spawned is not None:
                self._state.tasks.append(spawned)
            self.refresh(today)
            completed_today = self._state.history[today]

        logger.debug(
            "Task toggled id=%s done=%s spawned=%s completed_today=%s",
            task_id,
            completing,
            spawned.id if spawned else None,
            completed_today,
        )
        return ToggleResult(task=task, spawned=spawned, completed_today=completed_today)

    def cycle_priority(self, task_id: str) -> TaskModel | None:
        """Advance priority urgent -> high -> medium -> low -> urgent. Completed tasks are frozen."""
        with self._lock:
            task = self._find(task_id)
            if task is None or task.done:
                return None
            task.priority = task.priority.next()
        logger.debug("Task priority cycled id=%s priority=%s", task_id, task.priority.value)
        return task

    def edit_task(
        self,
        task_id: str,
        text: str | None,
        category: str,
        priority: Priority,
        recur: Recurrence,
        due: date | None,
        notes: str,
    ) -> TaskModel | None:
        """
        Overwrite a task's editable fields.

        The text is only replaced when the new value is non-empty after
        trimming; every other field is overwritten as given.
        """
        priority = Priority(priority)
        recur = Recurrence(recur)
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            new_text = (text or "").strip()
            if new_text:
                task.text = new_text
            task.category = category
            task.priority = priority
            task.recur = recur
            task.due = due
            task.notes = notes or ""
        logger.debug("Task edited id=%s", task_id)
        return task

    def delete_task(self, task_id: str, today: date | None = None) -> bool:
        """Remove a task. Returns False if it was already gone."""
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return False
            self._state.tasks.remove(task)
            self.refresh(today)
        logger.debug("Task deleted id=%s", task_id)
        return True
