"""Secondary views over reservations used by the calendar screens and exports."""

import calendar
from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal

from rental_calendar.models import Article, Client, Reservation
from rental_calendar.schemas.calendar import CalendarDay, DayBadge, MonthlyReport, MonthView, RevenueTier
from rental_calendar.services.date_range import as_day
from rental_calendar.services.occupancy import monthly_stats, reservations_starting_in

UNKNOWN_CLIENT = "Unknown client"


def revenue_tier(revenue: Decimal, low: Decimal, high: Decimal) -> RevenueTier:
    if revenue == 0:
        return RevenueTier.NONE
    if revenue < low:
        return RevenueTier.LOW
    if revenue < high:
        return RevenueTier.MEDIUM
    return RevenueTier.HIGH


def upcoming_reservations(
    reservations: Sequence[Reservation],
    today: date | None = None,
    limit: int = 5,
) -> list[Reservation]:
    """The next ``limit`` non-cancelled reservations starting today or later."""
    today = today or date.today()
    upcoming = [r for r in reservations if r.start_date >= today and not r.is_cancelled]
    upcoming.sort(key=lambda r: r.start_date)
    return upcoming[:limit]


def split_visible(day: CalendarDay, limit: int = 2) -> tuple[list[Reservation], int]:
    """Reservations shown in a day cell and how many are folded away."""
    return day.reservations[:limit], max(0, len(day.reservations) - limit)


def day_badges(
    view: MonthView,
    low: Decimal,
    high: Decimal,
    visible_limit: int = 2,
) -> dict[date, DayBadge]:
    """Badges for the current-month days of a grid that hold reservations."""
    badges = {}
    for day in view.current_month_days:
        if not day.has_reservations:
            continue
        visible, hidden = split_visible(day, visible_limit)
        badges[day.date] = DayBadge(
            revenue_tier=revenue_tier(day.revenue, low, high),
            visible_reservation_ids=[r.id for r in visible],
            hidden_count=hidden,
        )
    return badges


def client_names(clients: Sequence[Client]) -> dict[int, str]:
    return {c.id: c.name for c in clients}


def client_name(names: Mapping[int, str], client_id: int) -> str:
    return names.get(client_id, UNKNOWN_CLIENT)


def monthly_report(
    year: int,
    month: int,
    reservations: Sequence[Reservation],
    currency: str,
) -> MonthlyReport:
    """Export payload: the month's stats plus the reservations attributed to it."""
    return MonthlyReport(
        label=f"{calendar.month_name[month]} {year}",
        currency=currency,
        stats=monthly_stats(year, month, reservations),
        reservations=reservations_starting_in(year, month, reservations),
    )


def billable_days(start: date, end: date) -> int:
    """Days charged for a stay: day changes between start and end, at least one."""
    return abs((as_day(end) - as_day(start)).days) or 1


def estimate_total_price(
    items: Mapping[int, int],
    articles: Sequence[Article],
    start: date,
    end: date,
) -> Decimal:
    """Sum of price-per-day times quantity over the items, times the billable days.

    Articles without a price count as free; unknown articles are ignored.
    """
    by_id = {a.id: a for a in articles}
    per_day = sum(
        ((by_id[article_id].price_per_day or Decimal("0")) * quantity
         for article_id, quantity in items.items()
         if article_id in by_id),
        Decimal("0"),
    )
    return per_day * billable_days(start, end)
