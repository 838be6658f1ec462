"""Core MCP tool definitions for Routinely tasks."""

import json

from mcp.types import ToolAnnotations

from routinely_mcp.core.dates import today as current_date
from routinely_mcp.core.history import milestone_message
from routinely_mcp.core.query import query_tasks
from routinely_mcp.core.store import TaskValidationError
from routinely_mcp.enums import ResponseFormat, TaskFilter
from routinely_mcp.models.inputs import (
    AddTaskInput,
    CyclePriorityInput,
    DeleteTaskInput,
    EditTaskInput,
    GetTaskInput,
    ListTasksInput,
    ToggleTaskInput,
)
from routinely_mcp.server import mcp
from routinely_mcp.state import get_context
from routinely_mcp.utils.formatters import (
    PRIORITY_LABELS,
    RECUR_LABELS,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)


@mcp.tool(
    name="routinely_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_list(params: ListTasksInput) -> str:
    """
    List tasks through a filter and text search, ordered for display.

    USE THIS WHEN:
    - Showing the task list, or a view of it (active, done, overdue, recurring)
    - Searching for tasks by name
    - Finding a task ID before toggling, editing or deleting it

    DO NOT USE WHEN:
    - You have a specific task ID → use routinely_get instead
    - You want counts only → use routinely_stats instead

    FILTER KEYS:
    - "all", "active", "done", "overdue", "recur"
    - "high": high and urgent tasks
    - "urgent", "medium", "low": exactly that priority

    Incomplete tasks come first, then by priority (urgent first); tasks that
    tie keep their order in the list (newest first).

    Args:
        params: ListTasksInput containing filter, search, today, limit and response_format

    Returns:
        Formatted list of tasks (markdown, concise or JSON based on response_format)
    """
    today = params.today or current_date()
    tasks = query_tasks(get_context().store.tasks, params.filter, params.search, today)
    total_count = len(tasks)

    if params.limit and len(tasks) > params.limit:
        tasks = tasks[: params.limit]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": total_count,
                "count": len(tasks),
                "tasks": [t.model_dump(mode="json", by_alias=True) for t in tasks],
            },
            indent=2,
        )

    title = "Tasks"
    if params.filter != TaskFilter.ALL:
        title = f"Tasks ({params.filter.value})"
    if params.search:
        title += f" matching '{params.search}'"

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, today, params.filter.value)

    return _format_tasks_markdown(tasks, today, title)


@mcp.tool(
    name="routinely_get",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_get(params: GetTaskInput) -> str:
    """
    Get the full details of one task.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        The task in the requested format, or a not-found message
    """
    task = get_context().store.get_task(params.task_id)
    if task is None:
        return f"Task {params.task_id} not found."

    today = params.today or current_date()
    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(mode="json", by_alias=True), indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task, today)
    return _format_task_markdown(task, today)


@mcp.tool(
    name="routinely_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def routinely_add(params: AddTaskInput) -> str:
    """
    Create a new task at the top of the list.

    USE THIS WHEN:
    - Adding a new task to track
    - Adding a repeating task (daily, weekdays, weekly, monthly)

    DO NOT USE WHEN:
    - Changing an existing task → use routinely_edit instead

    Args:
        params: AddTaskInput containing text and optional category, priority, recur, due, notes and today

    Returns:
        Confirmation message with the created task ID

    Examples:
        - Simple task: params with text="Buy milk"
        - Daily habit: params with text="Read 20 pages", category="Learning", recur="daily"
        - Deadline: params with text="Submit proposal", priority="urgent", due="2024-03-01"
    """
    context = get_context()
    try:
        task = context.store.add_task(
            text=params.text,
            category=params.category or context.settings.default_category,
            priority=params.priority,
            recur=params.recur,
            due=params.due,
            notes=params.notes,
            today=params.today,
        )
    except TaskValidationError as e:
        return f"Error: {e}"

    context.commit()
    return f"Task added: {task.text}\nID: {task.id}"


@mcp.tool(
    name="routinely_toggle",
    annotations=ToolAnnotations(
        title="Toggle Task Completion",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def routinely_toggle(params: ToggleTaskInput) -> str:
    """
    Mark a task as done, or reopen a completed task.

    Completing a recurring task creates its next occurrence automatically.
    Today's completion count and the streak are updated in the same step.

    Args:
        params: ToggleTaskInput containing task_id and optional today

    Returns:
        Confirmation message, including the next occurrence and any milestone
    """
    context = get_context()
    result = context.store.toggle_done(params.task_id, params.today)
    if result is None:
        return f"Task {params.task_id} not found."
    context.commit()

    task = result.task
    if not task.done:
        return f"Task {task.id} marked as active."

    lines = [f"Task {task.id} completed!"]
    if result.spawned is not None:
        label = RECUR_LABELS[task.recur]
        lines.append(f"Next {label} task → {result.spawned.due.isoformat()} (ID: {result.spawned.id})")
    if message := milestone_message(result.completed_today):
        lines.append(message)
    return "\n".join(lines)


@mcp.tool(
    name="routinely_cycle_priority",
    annotations=ToolAnnotations(
        title="Cycle Task Priority",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def routinely_cycle_priority(params: CyclePriorityInput) -> str:
    """
    Move a task to the next priority: urgent → high → medium → low → urgent.

    Completed tasks keep their priority.

    Args:
        params: CyclePriorityInput containing task_id and optional today

    Returns:
        The new priority, or a message explaining why nothing changed
    """
    context = get_context()
    task = context.store.cycle_priority(params.task_id)
    if task is None:
        existing = context.store.get_task(params.task_id)
        if existing is None:
            return f"Task {params.task_id} not found."
        return f"Task {params.task_id} is completed; its priority is unchanged."

    context.commit()
    today = params.today or current_date()
    return f"Priority → {PRIORITY_LABELS[task.priority]}\n{_format_task_concise(task, today)}"


@mcp.tool(
    name="routinely_edit",
    annotations=ToolAnnotations(
        title="Edit Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_edit(params: EditTaskInput) -> str:
    """
    Edit an existing task's name, category, priority, recurrence, due date or notes.

    Fields left out keep their current value. A blank name is ignored.
    Set clear_due to remove the due date.

    Args:
        params: EditTaskInput containing task_id, the fields to change and optional today

    Returns:
        Confirmation message
    """
    context = get_context()
    current = context.store.get_task(params.task_id)
    if current is None:
        return f"Task {params.task_id} not found."

    due = None if params.clear_due else (params.due or current.due)
    task = context.store.edit_task(
        params.task_id,
        text=params.text,
        category=params.category or current.category,
        priority=params.priority or current.priority,
        recur=params.recur or current.recur,
        due=due,
        notes=current.notes if params.notes is None else params.notes,
    )
    if task is None:
        return f"Task {params.task_id} not found."

    context.commit()
    today = params.today or current_date()
    return f"Task {task.id} updated: {task.text}\n{_format_task_concise(task, today)}"


@mcp.tool(
    name="routinely_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def routinely_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task permanently.

    Args:
        params: DeleteTaskInput containing task_id and optional today

    Returns:
        Confirmation message
    """
    context = get_context()
    if not context.store.delete_task(params.task_id, params.today):
        return f"Task {params.task_id} not found."

    context.commit()
    return f"Task {params.task_id} deleted."
