"""Client model: only used to display names next to reservations."""

from rental_calendar.models.base import CamelModel


class Client(CamelModel):
    """A client as delivered by the client source."""

    id: int
    name: str
    phone: str | None = None
    email: str | None = None
    company_name: str | None = None
    event_type: str | None = None
    is_active: bool = True
