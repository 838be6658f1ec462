"""Calendar helpers for due dates and recurrence.

Everything here works on ``datetime.date`` values, so results never depend on
the caller's timezone or time of day.
"""

import calendar
from datetime import date, datetime, timedelta

from routinely_mcp.enums import Recurrence

# date.weekday(): Monday is 0, Saturday 5, Sunday 6
_WEEKEND = (5, 6)


def today() -> date:
    """Return the local calendar date."""
    return date.today()


def parse_date(value: date | str | None) -> date | None:
    """
    Coerce a date, ISO string or empty value into a date.

    Args:
        value: A date, a ``YYYY-MM-DD`` string (a time part is ignored), or None/""

    Returns:
        The calendar date, or None for empty input

    Raises:
        ValueError: If the string is not an ISO date
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def add_months(base: date, months: int) -> date:
    """
    Shift a date by whole calendar months.

    The day of month is kept where the target month has it, otherwise it is
    clamped to the target month's last day (Jan 31 + 1 month is Feb 28/29).
    """
    month_index = base.month - 1 + months
    year = base.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return base.replace(year=year, month=month, day=min(base.day, last_day))


def next_occurrence(
    from_date: date | None,
    rule: Recurrence,
    today_date: date | None = None,
) -> date:
    """
    Compute the next due date for a recurring task.

    Args:
        from_date: Base date; falls back to today_date (or the local date) when None
        rule: Recurrence rule to apply
        today_date: Explicit "today" used when from_date is missing

    Returns:
        The next occurrence. Rules without a step (``none``) return the base date.
    """
    base = from_date or today_date or today()
    rule = Recurrence(rule)

    if rule == Recurrence.DAILY:
        return base + timedelta(days=1)
    if rule == Recurrence.WEEKDAYS:
        nxt = base + timedelta(days=1)
        while nxt.weekday() in _WEEKEND:
            nxt += timedelta(days=1)
        return nxt
    if rule == Recurrence.WEEKLY:
        return base + timedelta(days=7)
    if rule == Recurrence.MONTHLY:
        return add_months(base, 1)
    return base


def is_overdue(due: date | None, today_date: date) -> bool:
    """Return True if a due date exists and is strictly before today."""
    return due is not None and due < today_date
