"""Pure calendar and availability computations.

Everything here is synchronous and side-effect free: inputs are in-memory
snapshots already validated at ingestion, outputs are rebuilt on every call.
"""

from rental_calendar.services.availability import (
    availability,
    availability_batch,
    check_booking,
    stock_from_articles,
)
from rental_calendar.services.calendar_grid import (
    build_month,
    current_month,
    next_month,
    previous_month,
)
from rental_calendar.services.date_range import inclusive_day_count, overlaps_day
from rental_calendar.services.dedup import merge_reservations
from rental_calendar.services.occupancy import monthly_stats
from rental_calendar.services.revenue import day_revenue

__all__ = [
    "availability",
    "availability_batch",
    "build_month",
    "check_booking",
    "current_month",
    "day_revenue",
    "inclusive_day_count",
    "merge_reservations",
    "monthly_stats",
    "next_month",
    "overlaps_day",
    "previous_month",
    "stock_from_articles",
]
