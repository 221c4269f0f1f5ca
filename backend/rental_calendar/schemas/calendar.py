"""Pydantic v2 schemas for calendar views and monthly statistics."""

import datetime as dt
from decimal import Decimal
from enum import Enum

from pydantic import ConfigDict, Field

from rental_calendar.models import Reservation
from rental_calendar.models.base import CamelModel


class RevenueTier(str, Enum):
    """Badge colour bucket for a day's revenue."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CalendarDay(CamelModel):
    """One cell of a month grid. Never mutated after construction."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    is_current_month: bool
    is_today: bool
    is_weekend: bool
    reservations: list[Reservation] = Field(default_factory=list)
    has_reservations: bool = False
    revenue: Decimal = Decimal("0")


class MonthView(CamelModel):
    """A week-aligned, padded sequence of days representing one month."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int  # 1-based
    month_name: str
    days: list[CalendarDay]

    @property
    def weeks(self) -> list[list[CalendarDay]]:
        """The grid split into rows of seven days."""
        return [self.days[i : i + 7] for i in range(0, len(self.days), 7)]

    @property
    def current_month_days(self) -> list[CalendarDay]:
        return [d for d in self.days if d.is_current_month]


class MonthlyStats(CamelModel):
    """Month-level statistics.

    ``total_reservations`` and ``total_revenue`` attribute each reservation to
    the month it starts in; ``occupied_days`` counts every covered day of the
    month regardless of where the covering reservation started.
    """

    model_config = ConfigDict(frozen=True)

    total_reservations: int = 0
    total_revenue: Decimal = Decimal("0")
    occupied_days: int = 0
    occupancy_rate: int = 0  # percentage 0-100


class DayBadge(CamelModel):
    """Cell decoration for a current-month day that has reservations."""

    revenue_tier: RevenueTier
    visible_reservation_ids: list[int | None]
    hidden_count: int = 0


class CalendarResponse(CamelModel):
    """Everything a presentation layer needs to render one month."""

    view: MonthView
    stats: MonthlyStats
    client_names: dict[int, str] = Field(default_factory=dict)
    badges: dict[dt.date, DayBadge] = Field(default_factory=dict)


class MonthlyReport(CamelModel):
    """Export payload for a month: label, stats and the reservations it owns."""

    label: str
    currency: str
    stats: MonthlyStats
    reservations: list[Reservation]


class ClientReservation(CamelModel):
    """A reservation with its client display name."""

    reservation: Reservation
    client_name: str


class UpcomingResponse(CamelModel):
    items: list[ClientReservation]
    total: int


class DayDetail(CamelModel):
    """Every reservation of one day, as shown when a cell is opened."""

    date: dt.date
    revenue: Decimal
    revenue_tier: RevenueTier
    reservations: list[ClientReservation]
