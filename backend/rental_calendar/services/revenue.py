"""Per-day revenue proration."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from rental_calendar.models import Reservation
from rental_calendar.services.date_range import inclusive_day_count, overlaps_day


def daily_share(reservation: Reservation) -> Decimal:
    """The part of a reservation's total price credited to each day of its stay."""
    if reservation.is_cancelled:
        return Decimal("0")
    days = inclusive_day_count(reservation.start_date, reservation.end_date)
    return reservation.total_price / Decimal(days)


def day_revenue(day: date, reservations: Iterable[Reservation]) -> Decimal:
    """Revenue credited to ``day``.

    Every non-cancelled reservation overlapping the day contributes its total
    price divided evenly over all the days it spans, so summing a stay's days
    gives back (up to rounding) its full price, even across month boundaries.
    """
    total = Decimal("0")
    for reservation in reservations:
        if overlaps_day(day, reservation.start_date, reservation.end_date):
            total += daily_share(reservation)
    return total
