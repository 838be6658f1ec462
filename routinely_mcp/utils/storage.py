"""JSON file persistence for the task list, history and streak."""

import json
import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from routinely_mcp.models.task import AppState, StreakState
from routinely_mcp.utils.parsers import _dump_history, _dump_tasks, _parse_history, _parse_streak, _parse_tasks

logger = logging.getLogger(__name__)

TASKS_KEY = "routinely_tasks"
HISTORY_KEY = "routinely_history"
STREAK_KEY = "routinely_streak"

T = TypeVar("T")


class JsonStateStorage:
    """
    Persist AppState as one JSON document with three top-level records.

    Writes go to a temporary file that replaces the target in one step, so
    the three records are always saved together. Loading never fails: a
    missing, unreadable or invalid record falls back to its default, and a file
    holding unreadable or invalid data is first copied to ``<name>.bak`` so the
    next save does not destroy it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> AppState:
        if not self.path.exists():
            logger.info("No state file at %s, starting empty", self.path)
            return AppState()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read state file %s (%s), starting empty", self.path, e)
            self._backup()
            return AppState()

        if not isinstance(data, dict):
            logger.warning("State file %s is not a JSON object, starting empty", self.path)
            self._backup()
            return AppState()

        invalid: list[str] = []
        state = AppState(
            tasks=_load_record(data, TASKS_KEY, _parse_tasks, list, invalid),
            history=_load_record(data, HISTORY_KEY, _parse_history, dict, invalid),
            streak=_load_record(data, STREAK_KEY, _parse_streak, StreakState, invalid),
        )
        if invalid:
            self._backup()
        logger.info(
            "Loaded state from %s tasks=%s history_days=%s streak=%s/%s",
            self.path,
            len(state.tasks),
            len(state.history),
            state.streak.current,
            state.streak.best,
        )
        return state

    def save(self, state: AppState) -> None:
        payload = {
            TASKS_KEY: _dump_tasks(state.tasks),
            HISTORY_KEY: _dump_history(state.history),
            STREAK_KEY: state.streak.model_dump(),
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Saved state to %s tasks=%s", self.path, len(state.tasks))

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".bak")

    def _backup(self) -> None:
        try:
            shutil.copy2(self.path, self.backup_path)
        except OSError as e:
            logger.error("Could not back up state file %s: %s", self.path, e)
            return
        logger.warning("Copied state file %s to %s before recovery", self.path, self.backup_path)


def _load_record(
    data: dict[str, Any],
    key: str,
    parse: Callable[[Any], T],
    default: Callable[[], T],
    invalid: list[str],
) -> T:
    if key not in data:
        logger.warning("State record %r missing, using default", key)
        return default()
    try:
        return parse(data[key])
    except ValidationError as e:
        logger.warning("State record %r is invalid, using default (%s error(s))", key, e.error_count())
        invalid.append(key)
        return default()
