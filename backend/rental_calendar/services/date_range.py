"""Day-granularity helpers shared by the grid, statistics and availability code."""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta

DateLike = date | datetime


def as_day(value: DateLike) -> date:
    """Return the calendar day of ``value``, ignoring any time component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def overlaps_day(day: DateLike, start: DateLike, end: DateLike) -> bool:
    """Return True if ``day`` falls within ``[start, end]`` inclusive.

    Each value is reduced to its own year/month/day before comparing, so a
    stored time of day or offset cannot shift the result by one day.
    """
    return as_day(start) <= as_day(day) <= as_day(end)


def inclusive_day_count(start: DateLike, end: DateLike) -> int:
    """Number of calendar days in ``[start, end]``; 1 when both are the same day."""
    first, last = as_day(start), as_day(end)
    if first == last:
        return 1
    return max((last - first).days + 1, 1)


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    day, last = as_day(start), as_day(end)
    while day <= last:
        yield day
        day = day + timedelta(days=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a 1-based month."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def in_month(day: DateLike, year: int, month: int) -> bool:
    day = as_day(day)
    return day.year == year and day.month == month
