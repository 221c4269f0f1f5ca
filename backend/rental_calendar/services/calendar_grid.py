"""Month grid construction and month navigation.

The grid is week-complete but not fixed-size: it starts on the most recent
week start on or before the 1st and stops as soon as the week holding the
last day of the month is full, giving 28, 35 or 42 cells. Only days inside
the month carry reservations and revenue; padding days exist for layout.
"""

import calendar
from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from rental_calendar.models import Reservation
from rental_calendar.schemas.calendar import CalendarDay, MonthView
from rental_calendar.services.date_range import month_bounds, overlaps_day
from rental_calendar.services.dedup import merge_reservations
from rental_calendar.services.revenue import day_revenue

WEEKEND_DAYS = frozenset({calendar.SATURDAY, calendar.SUNDAY})


def reservations_for_day(day: date, reservations: Sequence[Reservation]) -> list[Reservation]:
    """Reservations overlapping ``day``, each listed once."""
    return merge_reservations([
        [r for r in reservations if overlaps_day(day, r.start_date, r.end_date)]
    ])


def grid_bounds(year: int, month: int, week_start: int = calendar.SUNDAY) -> tuple[date, date]:
    """First and last day shown in the grid of a 1-based month."""
    first, last = month_bounds(year, month)
    leading = (first.weekday() - week_start) % 7
    trailing = (week_start - last.weekday() - 1) % 7
    return first - timedelta(days=leading), last + timedelta(days=trailing)


def build_month(
    year: int,
    month: int,
    reservations: Sequence[Reservation],
    *,
    today: date | None = None,
    week_start: int = calendar.SUNDAY,
) -> MonthView:
    """Build the calendar grid of a 1-based ``month``.

    Args:
        year: Target year.
        month: Target month, 1 (January) to 12.
        reservations: Every reservation that may touch the month.
        today: The "now" reference used for ``is_today``; defaults to the
            current local date.
        week_start: Weekday the grid rows start on (``calendar.MONDAY`` ..
            ``calendar.SUNDAY``).

    Returns:
        A MonthView whose ``days`` length is a multiple of seven.
    """
    today = today or date.today()
    first, last = month_bounds(year, month)
    grid_start, grid_end = grid_bounds(year, month, week_start)

    # Only reservations touching the month can populate a current-month cell
    in_month = merge_reservations([
        [r for r in reservations if r.start_date <= last and r.end_date >= first]
    ])

    days: list[CalendarDay] = []
    day = grid_start
    while day <= grid_end:
        is_current_month = first <= day <= last
        if is_current_month:
            day_reservations = reservations_for_day(day, in_month)
            revenue = day_revenue(day, day_reservations)
        else:
            day_reservations = []
            revenue = Decimal("0")

        days.append(
            CalendarDay(
                date=day,
                is_current_month=is_current_month,
                is_today=day == today,
                is_weekend=day.weekday() in WEEKEND_DAYS,
                reservations=day_reservations,
                has_reservations=bool(day_reservations),
                revenue=revenue,
            )
        )
        day += timedelta(days=1)

    return MonthView(
        year=year,
        month=month,
        month_name=calendar.month_name[month],
        days=days,
    )


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def current_month(today: date | None = None) -> tuple[int, int]:
    today = today or date.today()
    return today.year, today.month
