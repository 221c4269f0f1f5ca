"""Domain exceptions raised at the edges of the calendar engine.

The computations in ``rental_calendar.services`` never raise; these errors
belong to ingestion and the collaborator clients. Routers translate them
into ``HTTPException``.
"""


class RentalCalendarError(Exception):
    """Base class for all rental calendar errors."""


class DataUnavailable(RentalCalendarError):
    """A collaborator fetch failed (transport error, bad status or malformed payload)."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"{source}: {detail}")
