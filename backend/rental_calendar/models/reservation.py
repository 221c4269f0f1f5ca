"""Reservation model: a client's rental of articles over an inclusive date span."""

import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import AliasChoices, Field, field_validator, model_validator

from rental_calendar.models.base import CamelModel

logger = logging.getLogger(__name__)

# Labels still emitted by older backend builds
_LEGACY_STATUS_LABELS = {
    "enattente": "pending",
    "en_attente": "pending",
    "confirmee": "confirmed",
    "confirmée": "confirmed",
    "annulee": "cancelled",
    "annulée": "cancelled",
    "terminee": "completed",
    "terminée": "completed",
}


class ReservationStatus(str, Enum):
    """Lifecycle status of a reservation."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @classmethod
    def _missing_(cls, value: object) -> "ReservationStatus | None":
        if isinstance(value, str):
            label = value.strip().lower()
            label = _LEGACY_STATUS_LABELS.get(label, label)
            for member in cls:
                if member.value == label:
                    return member
        return None


def to_calendar_date(value: object) -> object:
    """Reduce a date-like value to its own calendar day.

    Datetimes keep their own year/month/day; no timezone conversion happens,
    so an offset or a late time of day can never move the value to a
    neighbouring day. ISO strings with a time part are parsed the same way.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and ("T" in value or " " in value.strip()):
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    return value


class ReservationItem(CamelModel):
    """One article line of a reservation."""

    id: int | None = None
    article_id: int
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(Decimal("0"), ge=0)


class Reservation(CamelModel):
    """A reservation as delivered by the reservation source.

    ``start_date`` and ``end_date`` are inclusive calendar days. A record
    whose end precedes its start is clamped (end = start) during validation,
    so every instance satisfies ``start_date <= end_date``.
    """

    id: int | None = None
    client_id: int
    start_date: date
    end_date: date
    status: ReservationStatus = ReservationStatus.PENDING
    total_price: Decimal = Decimal("0")
    items: list[ReservationItem] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "reservationItems", "reservation_items"),
        serialization_alias="reservationItems",
    )
    is_active: bool = True
    created_at: datetime | None = None
    notes: str | None = Field(
        None,
        validation_alias=AliasChoices("notes", "remarques"),
        serialization_alias="remarques",
    )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _drop_time_of_day(cls, value: object) -> object:
        return to_calendar_date(value)

    @model_validator(mode="after")
    def _clamp_end_to_start(self) -> "Reservation":
        """Normalize an inverted span instead of rejecting the record."""
        if self.end_date < self.start_date:
            logger.warning(
                "Reservation %s ends (%s) before it starts (%s); clamping end to start",
                self.id,
                self.end_date,
                self.start_date,
            )
            self.end_date = self.start_date
        return self

    @property
    def is_cancelled(self) -> bool:
        return self.status is ReservationStatus.CANCELLED

    def quantity_of(self, article_id: int) -> int:
        """Total quantity of ``article_id`` held by this reservation."""
        return sum(item.quantity for item in self.items if item.article_id == article_id)
