"""Weekday resolution and same-day filtering.

Day indexes follow the label row shown on the task screen::

    0    1    2    3    4    5    6
    Sun  Mon  Tue  Wed  Thu  Fri  Sat

``day_index + 1`` is the weekday number (Sunday = 1). Resolving a day index
against "now" yields the next date with that weekday, looking at most six
days ahead. When today already has that weekday, "now" itself is returned;
other days resolve to their midnight.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from daytasks.models import Task
from daytasks.utils.logger import get_logger

DAY_LABELS: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DAYS_IN_WEEK = len(DAY_LABELS)


def weekday_number(day_index: int) -> int:
    """Weekday number for a day index (Sunday = 1 ... Saturday = 7)."""
    return day_index + 1


def day_index_of(value: date | datetime) -> int:
    """Sunday-based day index of a date.

    ``date.weekday()`` counts from Monday, so Sunday (6) wraps to 0.
    """
    return (value.weekday() + 1) % DAYS_IN_WEEK


def _next_weekday(day_index: int, now: datetime) -> datetime:
    if isinstance(day_index, bool) or not isinstance(day_index, int):
        raise TypeError(f"day index must be an int, got {day_index!r}")
    if not 0 <= day_index < DAYS_IN_WEEK:
        raise ValueError(f"day index out of range: {day_index}")

    offset = (day_index - day_index_of(now)) % DAYS_IN_WEEK
    if offset == 0:
        return now

    target = now + timedelta(days=offset)
    return target.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_day(day_index: int, now: datetime) -> datetime:
    """Resolve a day index to a concrete date relative to *now*.

    Never raises: any failure (bad index, date overflow) falls back to *now*.
    """
    try:
        return _next_weekday(day_index, now)
    except (TypeError, ValueError, OverflowError) as e:
        get_logger("day_filter").debug(
            "could not resolve day %r from %s, using now: %s", day_index, now, e
        )
        return now


def is_same_day(a: date | datetime, b: date | datetime) -> bool:
    """True when year, month and day match; time of day is ignored."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def filter_tasks_for_day(
    tasks: Iterable[Task], day_index: int, now: datetime
) -> list[Task]:
    """Return tasks due on the day *day_index* resolves to, in store order.

    Completed tasks are kept; hiding them is up to the caller.
    """
    target = resolve_day(day_index, now)
    return [task for task in tasks if is_same_day(task.due_date, target)]
