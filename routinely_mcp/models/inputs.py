"""Input models for Routinely MCP tools."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from routinely_mcp.enums import Priority, Recurrence, ResponseFormat, TaskFilter

# ============================================================================
# Task Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    filter: TaskFilter = Field(
        default=TaskFilter.ALL,
        description="Filter key: all, active, done, high (high or urgent), overdue, recur, urgent, medium, low",
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive text to search for in task names, matched as typed (spaces count)",
    )
    today: date | None = Field(default=None, description="Date to evaluate overdue tasks against (YYYY-MM-DD)")
    limit: int | None = Field(default=50, description="Maximum number of tasks to return", ge=1, le=500)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., description="Task name (required)", min_length=1, max_length=1000)
    category: str | None = Field(default=None, description="Category label, e.g. Work, Health, Learning")
    priority: Priority = Field(default=Priority.MEDIUM, description="Task priority: urgent, high, medium or low")
    recur: Recurrence = Field(
        default=Recurrence.NONE,
        description="Recurrence: none, daily, weekdays, weekly or monthly",
    )
    due: date | None = Field(default=None, description="Due date (YYYY-MM-DD)")
    notes: str = Field(default="", description="Free-text notes", max_length=5000)
    today: date | None = Field(default=None, description="Date today's completion count is kept for (YYYY-MM-DD)")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task text cannot be empty")
        return v.strip()


class ToggleTaskInput(BaseModel):
    """Input model for toggling a task's completion."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="ID of the task to complete or reopen", min_length=1)
    today: date | None = Field(default=None, description="Completion date (YYYY-MM-DD), defaults to today")


class CyclePriorityInput(BaseModel):
    """Input model for cycling a task's priority."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="ID of the task whose priority to advance", min_length=1)
    today: date | None = Field(default=None, description="Date to evaluate overdue status against (YYYY-MM-DD)")


class EditTaskInput(BaseModel):
    """Input model for editing a task. Omitted fields keep their current value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="ID of the task to edit", min_length=1)
    text: str | None = Field(default=None, description="New task name (blank keeps the current name)")
    category: str | None = Field(default=None, description="New category label")
    priority: Priority | None = Field(default=None, description="New priority")
    recur: Recurrence | None = Field(default=None, description="New recurrence rule")
    due: date | None = Field(default=None, description="New due date (YYYY-MM-DD)")
    clear_due: bool = Field(default=False, description="Remove the due date")
    notes: str | None = Field(default=None, description="New notes (empty string clears them)")
    today: date | None = Field(default=None, description="Date to evaluate overdue status against (YYYY-MM-DD)")


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="ID of the task to delete", min_length=1)
    today: date | None = Field(default=None, description="Date today's completion count is kept for (YYYY-MM-DD)")


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="ID of the task to retrieve", min_length=1)
    today: date | None = Field(default=None, description="Date to evaluate overdue status against (YYYY-MM-DD)")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


# ============================================================================
# Analytics Input Models
# ============================================================================


class StreakInput(BaseModel):
    """Input model for the streak report."""

    today: date | None = Field(default=None, description="Date the streak ends on (YYYY-MM-DD)")
    days: int | None = Field(default=None, description="Heatmap window in days", ge=1, le=90)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class ScoreInput(BaseModel):
    """Input model for the productivity score."""

    today: date | None = Field(default=None, description="Date the score is computed for (YYYY-MM-DD)")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class StatsInput(BaseModel):
    """Input model for task counters and the priority breakdown."""

    today: date | None = Field(default=None, description="Date to evaluate overdue tasks against (YYYY-MM-DD)")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )
