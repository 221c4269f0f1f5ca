"""Domain records consumed by the calendar engine.

All of them are validated at ingestion, so the computations in
``rental_calendar.services`` can treat their inputs as well formed.
"""

from rental_calendar.models.article import Article
from rental_calendar.models.base import CamelModel
from rental_calendar.models.client import Client
from rental_calendar.models.reservation import (
    Reservation,
    ReservationItem,
    ReservationStatus,
    to_calendar_date,
)

__all__ = [
    "Article",
    "CamelModel",
    "Client",
    "Reservation",
    "ReservationItem",
    "ReservationStatus",
    "to_calendar_date",
]
