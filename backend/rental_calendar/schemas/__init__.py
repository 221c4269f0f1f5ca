"""Derived, disposable outputs of the calendar engine and API payloads."""

from rental_calendar.schemas.availability import (
    ArticleAvailability,
    AvailabilityResponse,
    BookingConflictDetail,
    BookingItemRequest,
    BookingRequest,
    Shortage,
)
from rental_calendar.schemas.calendar import (
    CalendarDay,
    CalendarResponse,
    ClientReservation,
    DayBadge,
    DayDetail,
    MonthlyReport,
    MonthlyStats,
    MonthView,
    RevenueTier,
    UpcomingResponse,
)

__all__ = [
    "ArticleAvailability",
    "AvailabilityResponse",
    "BookingConflictDetail",
    "BookingItemRequest",
    "BookingRequest",
    "CalendarDay",
    "CalendarResponse",
    "ClientReservation",
    "DayBadge",
    "DayDetail",
    "MonthView",
    "MonthlyReport",
    "MonthlyStats",
    "RevenueTier",
    "Shortage",
    "UpcomingResponse",
]
