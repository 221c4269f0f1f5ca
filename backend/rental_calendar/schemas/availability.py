"""Pydantic v2 schemas for article availability and the booking gate."""

from datetime import date
from decimal import Decimal

from pydantic import Field, model_validator

from rental_calendar.models.base import CamelModel


class ArticleAvailability(CamelModel):
    """Remaining rentable quantity of one article over a requested span.

    ``quantity_available`` is ``None`` when no stock figure exists for the
    article; that is distinct from ``0`` (fully booked).
    """

    id: int
    name: str | None = None
    description: str | None = None
    price_per_day: Decimal | None = None
    quantity_total: int | None = None
    quantity_available: int | None = None


class AvailabilityResponse(CamelModel):
    start_date: date
    end_date: date
    articles: list[ArticleAvailability]


class BookingItemRequest(CamelModel):
    article_id: int
    quantity: int = Field(..., ge=1)


class BookingRequest(CamelModel):
    """Schema for submitting a new reservation through the booking gate."""

    client_id: int
    start_date: date
    end_date: date
    items: list[BookingItemRequest] = Field(..., min_length=1)
    notes: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "BookingRequest":
        """Clamp an end date before the start date to the start date."""
        if self.end_date < self.start_date:
            self.end_date = self.start_date
        return self


class Shortage(CamelModel):
    """An item whose requested quantity exceeds what remains over the span."""

    article_id: int
    requested: int
    available: int


class BookingConflictDetail(CamelModel):
    message: str
    shortages: list[Shortage]
