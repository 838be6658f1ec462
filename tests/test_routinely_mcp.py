"""Tests for the Routinely MCP server: inputs, persistence, formatting and tools."""

import json
import logging
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from routinely_mcp import (
    AddTaskInput,
    AppState,
    CyclePriorityInput,
    DeleteTaskInput,
    EditTaskInput,
    GetTaskInput,
    JsonStateStorage,
    ListTasksInput,
    Priority,
    Recurrence,
    ResponseFormat,
    ScoreInput,
    StatsInput,
    StreakInput,
    StreakState,
    TaskFilter,
    ToggleTaskInput,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_task,
    get_context,
    routinely_add,
    routinely_cycle_priority,
    routinely_delete,
    routinely_edit,
    routinely_get,
    routinely_list,
    routinely_score,
    routinely_stats,
    routinely_streak,
    routinely_toggle,
)
from routinely_mcp.config import Settings
from routinely_mcp.logging_setup import setup_logging
from routinely_mcp.utils.storage import HISTORY_KEY, STREAK_KEY, TASKS_KEY

# ============================================================================
# Input Model Tests
# ============================================================================


class TestInputModels:
    """Tests for Pydantic input models."""

    def test_list_tasks_input_defaults(self):
        """Test ListTasksInput with default values."""
        input_model = ListTasksInput()
        assert input_model.filter == TaskFilter.ALL
        assert input_model.search is None
        assert input_model.today is None
        assert input_model.limit == 50
        assert input_model.response_format == ResponseFormat.MARKDOWN

    def test_list_tasks_input_parses_strings(self):
        """Test filter and date strings are converted."""
        input_model = ListTasksInput(filter="overdue", today="2024-01-10")
        assert input_model.filter == TaskFilter.OVERDUE
        assert input_model.today == date(2024, 1, 10)

    def test_list_tasks_input_keeps_search_spaces(self):
        assert ListTasksInput(search=" ").search == " "

    def test_mutating_inputs_accept_today(self):
        """Test every task-changing input carries an optional today."""
        models = [
            AddTaskInput(text="x", today="2024-01-10"),
            DeleteTaskInput(task_id="a", today="2024-01-10"),
            EditTaskInput(task_id="a", today="2024-01-10"),
            CyclePriorityInput(task_id="a", today="2024-01-10"),
        ]
        for model in models:
            assert model.today == date(2024, 1, 10)
        assert DeleteTaskInput(task_id="a").today is None

    def test_list_tasks_input_unknown_filter(self):
        with pytest.raises(ValidationError):
            ListTasksInput(filter="someday")

    def test_add_task_input_defaults(self):
        input_model = AddTaskInput(text="Buy milk")
        assert input_model.priority == Priority.MEDIUM
        assert input_model.recur == Recurrence.NONE
        assert input_model.category is None
        assert input_model.due is None

    def test_add_task_input_strips_whitespace(self):
        input_model = AddTaskInput(text="  Buy milk  ")
        assert input_model.text == "Buy milk"

    def test_add_task_input_empty_text_fails(self):
        with pytest.raises(ValidationError):
            AddTaskInput(text="   ")

    def test_add_task_input_invalid_recur_fails(self):
        with pytest.raises(ValidationError):
            AddTaskInput(text="x", recur="yearly")

    def test_edit_task_input_optional_fields(self):
        input_model = EditTaskInput(task_id="abc")
        assert input_model.text is None
        assert input_model.priority is None
        assert input_model.clear_due is False

    def test_task_id_required(self):
        with pytest.raises(ValidationError):
            ToggleTaskInput(task_id="")


class TestEnums:
    """Tests for enum values."""

    def test_priority_values(self):
        assert [p.value for p in Priority] == ["urgent", "high", "medium", "low"]

    def test_recurrence_values(self):
        assert [r.value for r in Recurrence] == ["none", "daily", "weekdays", "weekly", "monthly"]

    def test_filter_values(self):
        assert TaskFilter("high") == TaskFilter.HIGH
        assert TaskFilter("recur") == TaskFilter.RECUR


# ============================================================================
# Configuration and Logging
# ============================================================================


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for suffix in ("STREAK_LOOKBACK_DAYS", "DATA_FILE", "HEATMAP_DAYS", "DEFAULT_CATEGORY"):
            monkeypatch.delenv(f"ROUTINELY_{suffix}", raising=False)
        settings = Settings()
        assert settings.streak_lookback_days == 365
        assert settings.heatmap_days == 14
        assert settings.default_category == "Work"
        assert settings.data_file.name == "state.json"

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ROUTINELY_STREAK_LOOKBACK_DAYS", "30")
        monkeypatch.setenv("ROUTINELY_DATA_FILE", str(tmp_path / "tasks.json"))
        settings = Settings()
        assert settings.streak_lookback_days == 30
        assert settings.data_file == tmp_path / "tasks.json"


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_with_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            log_file = tmp_path / "logs" / "routinely.log"
            setup_logging("debug", log_file)
            logging.getLogger("routinely_mcp.test").info("hello log")
            for h in root.handlers:
                h.flush()
            assert len(root.handlers) == 2
            assert "hello log" in log_file.read_text(encoding="utf-8")
        finally:
            for h in list(root.handlers):
                root.removeHandler(h)
                h.close()
            for h in saved_handlers:
                root.addHandler(h)
            root.setLevel(saved_level)


# ============================================================================
# Persistence
# ============================================================================


class TestParsers:
    """Tests for record parsing."""

    def test_parse_camel_case_task(self):
        task = _parse_task(
            {
                "id": 1700000000000,
                "text": "Team standup",
                "category": "Work",
                "priority": "high",
                "recur": "weekdays",
                "due": "2024-01-10",
                "done": True,
                "notes": "",
                "completedDate": "2024-01-10",
                "createdAt": "2024-01-10T08:00:00.000Z",
            }
        )
        assert task.id == "1700000000000"
        assert task.completed_date == date(2024, 1, 10)
        assert task.priority == Priority.HIGH
        assert task.recur == Recurrence.WEEKDAYS
        assert task.created_at.year == 2024

    def test_parse_blank_due(self):
        task = _parse_task({"id": 2, "text": "No date", "due": "", "done": False, "completedDate": None})
        assert task.due is None
        assert task.completed_date is None


class TestJsonStateStorage:
    """Tests for loading and saving the three state records."""

    def test_missing_file_gives_defaults(self, tmp_path):
        state = JsonStateStorage(tmp_path / "nope.json").load()
        assert state == AppState()

    def test_save_then_load(self, tmp_path, make_task):
        storage = JsonStateStorage(tmp_path / "sub" / "state.json")
        state = AppState(
            tasks=[make_task("a", due=date(2024, 1, 9)), make_task("b", done=True)],
            history={date(2024, 1, 9): 2, date(2024, 1, 10): 1},
            streak=StreakState(current=2, best=5),
        )
        storage.save(state)

        raw = json.loads(storage.path.read_text(encoding="utf-8"))
        assert set(raw) == {TASKS_KEY, HISTORY_KEY, STREAK_KEY}
        assert raw[HISTORY_KEY] == {"2024-01-09": 2, "2024-01-10": 1}
        assert raw[TASKS_KEY][1]["completedDate"] == "2024-01-10"
        assert "createdAt" in raw[TASKS_KEY][0]

        assert storage.load() == state

    def test_save_leaves_no_temp_files(self, tmp_path):
        storage = JsonStateStorage(tmp_path / "state.json")
        storage.save(AppState())
        storage.save(AppState())
        assert [p.name for p in tmp_path.iterdir()] == ["state.json"]

    def test_corrupt_file_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            state = JsonStateStorage(path).load()
        assert state == AppState()
        assert "Could not read" in caplog.text
        assert (tmp_path / "state.json.bak").read_text(encoding="utf-8") == "{not json"

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert JsonStateStorage(path).load() == AppState()

    def test_invalid_record_falls_back_alone(self, tmp_path, caplog):
        """Test one bad record is replaced by its default while the others load."""
        path = tmp_path / "state.json"
        path.write_text(
            json.dumps(
                {
                    TASKS_KEY: [{"id": "1", "text": "ok"}],
                    HISTORY_KEY: {"yesterday": "lots"},
                    STREAK_KEY: {"current": 3, "best": 4},
                }
            ),
            encoding="utf-8",
        )
        with caplog.at_level(logging.WARNING):
            state = JsonStateStorage(path).load()
        assert [t.text for t in state.tasks] == ["ok"]
        assert state.history == {}
        assert state.streak == StreakState(current=3, best=4)
        assert HISTORY_KEY in caplog.text

    def test_invalid_task_list_backed_up_before_save(self, tmp_path):
        """Test the original file survives the save that follows a task list reset."""
        path = tmp_path / "state.json"
        original = json.dumps(
            {
                TASKS_KEY: [
                    {"id": "1", "text": "first"},
                    {"id": "2", "text": "second"},
                    {"id": "3", "text": "bad", "priority": "critical"},
                ],
                HISTORY_KEY: {},
                STREAK_KEY: {"current": 0, "best": 0},
            }
        )
        path.write_text(original, encoding="utf-8")

        storage = JsonStateStorage(path)
        state = storage.load()
        assert state.tasks == []

        storage.save(state)
        assert storage.backup_path == tmp_path / "state.json.bak"
        backup = json.loads(storage.backup_path.read_text(encoding="utf-8"))
        assert [t["text"] for t in backup[TASKS_KEY]] == ["first", "second", "bad"]

    def test_missing_record_uses_default(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({TASKS_KEY: []}), encoding="utf-8")
        state = JsonStateStorage(path).load()
        assert state.streak == StreakState()
        assert state.history == {}
        assert not (tmp_path / "state.json.bak").exists()

    def test_valid_file_not_backed_up(self, tmp_path):
        storage = JsonStateStorage(tmp_path / "state.json")
        storage.save(AppState(streak=StreakState(current=1, best=1)))
        storage.load()
        assert not storage.backup_path.exists()

    def test_negative_streak_rejected(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({STREAK_KEY: {"current": -1, "best": 2}}), encoding="utf-8")
        assert JsonStateStorage(path).load().streak == StreakState()


# ============================================================================
# Formatter Tests
# ============================================================================


class TestFormatters:
    """Tests for markdown and concise task formatting."""

    def test_markdown_basic(self, make_task, today):
        result = _format_task_markdown(make_task("Buy milk", id="abc"), today)
        assert "[ ] Buy milk" in result
        assert "`abc`" in result
        assert "**Priority**: Medium" in result
        assert "**Category**: Work" in result

    def test_markdown_overdue(self, make_task, today):
        task = make_task("Late", due=today - timedelta(days=1))
        assert "**Overdue**: 2024-01-09" in _format_task_markdown(task, today)

    def test_markdown_done_recurring_shows_next(self, make_task, today):
        task = make_task("Run", recur=Recurrence.DAILY, due=today, done=True)
        result = _format_task_markdown(task, today)
        assert "[x] Run" in result
        assert "**Repeats**: Daily" in result
        assert "**Completed**: 2024-01-10" in result
        assert "**Next**: 2024-01-11" in result

    def test_markdown_notes(self, make_task, today):
        assert "**Notes:** bring bags" in _format_task_markdown(make_task(notes="bring bags"), today)

    def test_markdown_list_empty(self, today):
        assert "No tasks here" in _format_tasks_markdown([], today)

    def test_markdown_list(self, make_task, today):
        result = _format_tasks_markdown([make_task("one"), make_task("two")], today, "My Tasks")
        assert "# My Tasks" in result
        assert "*2 task(s)*" in result

    def test_concise(self, make_task, today):
        task = make_task("Read", id="r1", priority=Priority.LOW, recur=Recurrence.DAILY, due=today - timedelta(days=3))
        assert _format_task_concise(task, today) == "[ ] r1: Read (low, due:2024-01-07!, Work, daily)"

    def test_concise_list(self, make_task, today):
        assert _format_tasks_concise([], today) == "0 tasks"
        result = _format_tasks_concise([make_task("one"), make_task("two")], today, "active")
        assert result.splitlines()[0] == "2 task(s) | active"


# ============================================================================
# Tool Tests
# ============================================================================


async def _add(text, **kwargs):
    await routinely_add(AddTaskInput(text=text, **kwargs))
    return get_context().store.tasks[0]


class TestRoutinelyAdd:
    """Tests for the routinely_add tool."""

    @pytest.mark.asyncio
    async def test_add_task(self, app_context):
        result = await routinely_add(AddTaskInput(text="Buy milk", priority="low", due="2024-01-10"))
        assert "Task added: Buy milk" in result

        tasks = app_context.store.tasks
        assert len(tasks) == 1
        assert tasks[0].done is False
        assert tasks[0].category == "Work"
        assert tasks[0].id in result

    @pytest.mark.asyncio
    async def test_add_persists(self, app_context):
        await routinely_add(AddTaskInput(text="Buy milk"))
        raw = json.loads(app_context.storage.path.read_text(encoding="utf-8"))
        assert raw[TASKS_KEY][0]["text"] == "Buy milk"
        assert set(raw) == {TASKS_KEY, HISTORY_KEY, STREAK_KEY}

    @pytest.mark.asyncio
    async def test_add_with_category(self, app_context):
        await routinely_add(AddTaskInput(text="Run", category="Health", recur="daily"))
        task = app_context.store.tasks[0]
        assert task.category == "Health"
        assert task.recur == Recurrence.DAILY


class TestRoutinelyToggle:
    """Tests for the routinely_toggle tool."""

    @pytest.mark.asyncio
    async def test_complete_and_reopen(self, app_context, today):
        task = await _add("Buy milk")
        result = await routinely_toggle(ToggleTaskInput(task_id=task.id, today=today))
        assert "completed" in result
        assert app_context.store.history[today] == 1
        assert app_context.store.streak == StreakState(current=1, best=1)

        result = await routinely_toggle(ToggleTaskInput(task_id=task.id, today=today))
        assert "marked as active" in result
        assert app_context.store.history[today] == 0

    @pytest.mark.asyncio
    async def test_complete_recurring_reports_next(self, app_context):
        task = await _add("Plan groceries", recur="weekly", due="2024-01-01")
        result = await routinely_toggle(ToggleTaskInput(task_id=task.id, today="2024-01-01"))
        assert "Next Weekly task → 2024-01-08" in result
        assert len(app_context.store.tasks) == 2

    @pytest.mark.asyncio
    async def test_milestone(self, app_context, today):
        ids = [(await _add(f"task {i}")).id for i in range(5)]
        for task_id in ids[:4]:
            result = await routinely_toggle(ToggleTaskInput(task_id=task_id, today=today))
            assert "5 tasks done today" not in result
        result = await routinely_toggle(ToggleTaskInput(task_id=ids[4], today=today))
        assert "5 tasks done today" in result

    @pytest.mark.asyncio
    async def test_toggle_not_found(self, app_context):
        result = await routinely_toggle(ToggleTaskInput(task_id="missing"))
        assert "not found" in result
        assert not app_context.storage.path.exists()

    @pytest.mark.asyncio
    async def test_toggle_persists_all_records(self, app_context, today):
        task = await _add("Buy milk")
        await routinely_toggle(ToggleTaskInput(task_id=task.id, today=today))
        raw = json.loads(app_context.storage.path.read_text(encoding="utf-8"))
        assert raw[TASKS_KEY][0]["done"] is True
        assert raw[HISTORY_KEY][today.isoformat()] == 1
        assert raw[STREAK_KEY] == {"current": 1, "best": 1}


class TestRoutinelyCyclePriority:
    """Tests for the routinely_cycle_priority tool."""

    @pytest.mark.asyncio
    async def test_cycle(self, app_context):
        task = await _add("x", priority="low")
        result = await routinely_cycle_priority(CyclePriorityInput(task_id=task.id))
        assert "Urgent" in result
        assert result.splitlines()[1].startswith(f"[ ] {task.id}: x (urgent")
        assert app_context.store.get_task(task.id).priority == Priority.URGENT

    @pytest.mark.asyncio
    async def test_cycle_done_task(self, app_context, today):
        task = await _add("x", priority="low")
        await routinely_toggle(ToggleTaskInput(task_id=task.id, today=today))
        result = await routinely_cycle_priority(CyclePriorityInput(task_id=task.id))
        assert "unchanged" in result
        assert app_context.store.get_task(task.id).priority == Priority.LOW

    @pytest.mark.asyncio
    async def test_cycle_not_found(self, app_context):
        assert "not found" in await routinely_cycle_priority(CyclePriorityInput(task_id="missing"))


class TestRoutinelyEdit:
    """Tests for the routinely_edit tool."""

    @pytest.mark.asyncio
    async def test_edit_some_fields(self, app_context):
        task = await _add("Old", category="Home", due="2024-01-10", notes="keep")
        result = await routinely_edit(EditTaskInput(task_id=task.id, text="New", priority="urgent"))
        assert "updated: New" in result

        edited = app_context.store.get_task(task.id)
        assert edited.text == "New"
        assert edited.priority == Priority.URGENT
        assert edited.category == "Home"
        assert edited.due == date(2024, 1, 10)
        assert edited.notes == "keep"

    @pytest.mark.asyncio
    async def test_edit_blank_text_and_clear_due(self, app_context):
        task = await _add("Keep", due="2024-01-10")
        await routinely_edit(EditTaskInput(task_id=task.id, text="   ", clear_due=True, notes=""))
        edited = app_context.store.get_task(task.id)
        assert edited.text == "Keep"
        assert edited.due is None

    @pytest.mark.asyncio
    async def test_edit_reports_overdue_for_given_day(self, app_context, today):
        task = await _add("Pay rent", today=today)
        result = await routinely_edit(EditTaskInput(task_id=task.id, due="2024-01-01", today=today))
        assert f"{task.id}: Pay rent" in result.splitlines()[1]
        assert "due:2024-01-01!" in result

    @pytest.mark.asyncio
    async def test_edit_not_found(self, app_context):
        assert "not found" in await routinely_edit(EditTaskInput(task_id="missing", text="x"))


class TestRoutinelyDelete:
    """Tests for the routinely_delete tool."""

    @pytest.mark.asyncio
    async def test_delete(self, app_context):
        task = await _add("x")
        assert "deleted" in await routinely_delete(DeleteTaskInput(task_id=task.id))
        assert app_context.store.tasks == []
        assert "not found" in await routinely_delete(DeleteTaskInput(task_id=task.id))

    @pytest.mark.asyncio
    async def test_delete_keeps_streak_for_given_day(self, app_context, today):
        """Test deleting with an explicit today does not recount a different day."""
        done = await _add("Buy milk", today=today)
        other = await _add("Call mum", today=today)
        await routinely_toggle(ToggleTaskInput(task_id=done.id, today=today))
        assert app_context.store.streak == StreakState(current=1, best=1)

        await routinely_delete(DeleteTaskInput(task_id=other.id, today=today))
        assert app_context.store.streak == StreakState(current=1, best=1)
        assert set(app_context.store.history) == {today}

        raw = json.loads(app_context.storage.path.read_text(encoding="utf-8"))
        assert raw[STREAK_KEY] == {"current": 1, "best": 1}
        assert raw[HISTORY_KEY] == {today.isoformat(): 1}

    @pytest.mark.asyncio
    async def test_add_keeps_streak_for_given_day(self, app_context, today):
        done = await _add("Buy milk", today=today)
        await routinely_toggle(ToggleTaskInput(task_id=done.id, today=today))
        await routinely_add(AddTaskInput(text="Call mum", today=today))
        assert app_context.store.streak == StreakState(current=1, best=1)
        assert set(app_context.store.history) == {today}


class TestRoutinelyListAndGet:
    """Tests for the routinely_list and routinely_get tools."""

    @pytest.mark.asyncio
    async def test_list_json_sorted(self, app_context, today):
        low = await _add("low one", priority="low")
        await _add("urgent one", priority="urgent")
        await routinely_toggle(ToggleTaskInput(task_id=low.id, today=today))

        result = await routinely_list(ListTasksInput(response_format="json", today=today))
        data = json.loads(result)
        assert data["total"] == 2
        assert [t["text"] for t in data["tasks"]] == ["urgent one", "low one"]

    @pytest.mark.asyncio
    async def test_list_filter_and_search(self, app_context, today):
        await _add("Read book", due="2024-01-01")
        await _add("Read news")
        result = await routinely_list(
            ListTasksInput(filter="overdue", search="read", today=today, response_format="concise")
        )
        assert result.splitlines()[0] == "1 task(s) | overdue"
        assert "Read book" in result

    @pytest.mark.asyncio
    async def test_list_search_keeps_spaces(self, app_context):
        await _add("Buy milk")
        await _add("Run")
        data = json.loads(await routinely_list(ListTasksInput(search=" ", response_format="json")))
        assert [t["text"] for t in data["tasks"]] == ["Buy milk"]

    @pytest.mark.asyncio
    async def test_list_limit(self, app_context):
        for i in range(3):
            await _add(f"t{i}")
        data = json.loads(await routinely_list(ListTasksInput(limit=2, response_format="json")))
        assert data["total"] == 3
        assert data["count"] == 2

    @pytest.mark.asyncio
    async def test_list_markdown_empty(self, app_context):
        assert "No tasks here" in await routinely_list(ListTasksInput())

    @pytest.mark.asyncio
    async def test_get(self, app_context, today):
        task = await _add("Buy milk", notes="2 litres")
        result = await routinely_get(GetTaskInput(task_id=task.id, today=today))
        assert "Buy milk" in result
        assert "2 litres" in result

        data = json.loads(await routinely_get(GetTaskInput(task_id=task.id, response_format="json")))
        assert data["id"] == task.id
        assert data["completedDate"] is None
        assert "createdAt" in data
        assert "completed_date" not in data

    @pytest.mark.asyncio
    async def test_get_not_found(self, app_context):
        assert "not found" in await routinely_get(GetTaskInput(task_id="missing"))


class TestAnalyticsTools:
    """Tests for the streak, score and stats tools."""

    @pytest.mark.asyncio
    async def test_streak_json(self, app_context, today):
        task = await _add("x")
        await routinely_toggle(ToggleTaskInput(task_id=task.id, today=today))

        data = json.loads(await routinely_streak(StreakInput(today=today, response_format="json")))
        assert data["streak"] == {"current": 1, "best": 1}
        assert data["tier"] == 1
        assert len(data["heatmap"]) == 14
        assert data["heatmap"][-1] == {"day": "2024-01-10", "count": 1, "level": 4, "is_today": True}

    @pytest.mark.asyncio
    async def test_streak_resets_on_new_day(self, app_context, today):
        task = await _add("x")
        await routinely_toggle(ToggleTaskInput(task_id=task.id, today=today))

        later = today + timedelta(days=2)
        result = await routinely_streak(StreakInput(today=later, days=7))
        assert "**Current**: 0 day(s)" in result
        assert "**Best**: 1 day(s)" in result
        assert app_context.store.history[later] == 0

    @pytest.mark.asyncio
    async def test_score(self, app_context, today):
        await _add("a", priority="high")
        done = await _add("b", priority="low")
        await routinely_toggle(ToggleTaskInput(task_id=done.id, today=today))

        data = json.loads(await routinely_score(ScoreInput(today=today, response_format="json")))
        # completion 50, streak 1/14 -> 7, high priority 0/1 -> 0
        assert data == {"completion_pct": 50, "streak_pct": 7, "priority_pct": 0, "score": 27, "grade": "F"}

        assert "**Score**: 27 (F)" in await routinely_score(ScoreInput(today=today))

    @pytest.mark.asyncio
    async def test_stats(self, app_context, today):
        await _add("a", priority="urgent", due="2024-01-01")
        await _add("b", priority="urgent")
        done = await _add("c", priority="low")
        await routinely_toggle(ToggleTaskInput(task_id=done.id, today=today))

        data = json.loads(await routinely_stats(StatsInput(today=today, response_format="json")))
        assert data["counts"] == {"total": 3, "done": 1, "pending": 2, "overdue": 1, "completion_pct": 33}
        assert data["open_by_priority"] == {"urgent": 2, "high": 0, "medium": 0, "low": 0}

        result = await routinely_stats(StatsInput(today=today))
        assert "**Overdue**: 1" in result
        assert "- Urgent: 2" in result
