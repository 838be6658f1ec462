"""Pytest configuration and fixtures for routinely-mcp tests."""

import itertools
from datetime import date, datetime, timezone

import pytest

from routinely_mcp.config import Settings
from routinely_mcp.core.store import TaskStore
from routinely_mcp.models.task import TaskModel
from routinely_mcp.state import AppContext, set_context
from routinely_mcp.utils.storage import JsonStateStorage

TODAY = date(2024, 1, 10)  # a Wednesday


@pytest.fixture
def today():
    """Fixed 'today' so date-driven results are reproducible."""
    return TODAY


@pytest.fixture
def make_task():
    """Factory for TaskModel instances with sequential ids."""
    counter = itertools.count(1)

    def _make(text="Task", **kwargs):
        kwargs.setdefault("id", f"t{next(counter)}")
        kwargs.setdefault("created_at", datetime(2024, 1, 1, tzinfo=timezone.utc))
        if kwargs.get("done") and "completed_date" not in kwargs:
            kwargs["completed_date"] = TODAY
        return TaskModel(text=text, **kwargs)

    return _make


@pytest.fixture
def store():
    """Empty task store with deterministic ids."""
    counter = itertools.count(1)
    return TaskStore(id_factory=lambda: f"id{next(counter)}")


@pytest.fixture
def app_context(tmp_path):
    """Process-wide AppContext backed by a temporary state file."""
    settings = Settings(data_file=tmp_path / "state.json")
    context = AppContext(JsonStateStorage(settings.data_file), settings)
    set_context(context)
    yield context
    set_context(None)
