"""Month-level reservation statistics."""

from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from rental_calendar.models import Reservation
from rental_calendar.schemas.calendar import MonthlyStats
from rental_calendar.services.date_range import days_in_month, in_month, iter_days, month_bounds


def reservations_starting_in(year: int, month: int, reservations: Sequence[Reservation]) -> list[Reservation]:
    """Reservations attributed to a month: those whose start date lies in it."""
    return [r for r in reservations if in_month(r.start_date, year, month)]


def occupied_dates(year: int, month: int, reservations: Sequence[Reservation]) -> set[date]:
    """Distinct days of the month covered by at least one non-cancelled reservation."""
    first, last = month_bounds(year, month)
    covered: set[date] = set()
    for reservation in reservations:
        if reservation.is_cancelled:
            continue
        if reservation.end_date < first or reservation.start_date > last:
            continue
        for day in iter_days(reservation.start_date, reservation.end_date):
            if first <= day <= last:
                covered.add(day)
    return covered


def occupancy_rate(occupied_days: int, total_days: int) -> int:
    """Whole-number percentage of occupied days, rounded half up."""
    if total_days <= 0:
        return 0
    rate = Decimal(occupied_days * 100) / Decimal(total_days)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def monthly_stats(year: int, month: int, reservations: Sequence[Reservation]) -> MonthlyStats:
    """Compute the statistics of a 1-based month.

    Count and revenue attribute each reservation wholly to the month it
    starts in, using its full total price. Occupied days are taken from the
    actual spans, so a stay that began last month still occupies this
    month's days. Per-day prorated revenue lives in ``revenue.day_revenue``
    and is a separate view from ``total_revenue``.

    This intentionally differs from the older calendar screen, which only
    walked the reservations attributed to the month when counting occupied days.
    """
    attributed = reservations_starting_in(year, month, reservations)
    total_revenue = sum(
        (r.total_price for r in attributed if not r.is_cancelled),
        Decimal("0"),
    )
    occupied = len(occupied_dates(year, month, reservations))

    return MonthlyStats(
        total_reservations=len(attributed),
        total_revenue=total_revenue,
        occupied_days=occupied,
        occupancy_rate=occupancy_rate(occupied, days_in_month(year, month)),
    )
