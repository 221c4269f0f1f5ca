"""Month loading and navigation over the collaborator sources.

A navigation fans out the reservation and client requests concurrently and
only builds the grid once both have completed. The month-scoped reservation
query falls back to the full collection when it fails; if that fails too the
navigation ends in an error state rather than an empty grid.

Navigations can overlap (repeated "next" clicks), so each one is tagged with
an increasing generation. A result older than the newest one already shown
is dropped.
"""

import asyncio
import calendar
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from rental_calendar.errors import DataUnavailable
from rental_calendar.models import Reservation
from rental_calendar.schemas.calendar import MonthlyStats, MonthView
from rental_calendar.services.calendar_grid import build_month, current_month, next_month, previous_month
from rental_calendar.services.dedup import merge_reservations
from rental_calendar.services.insights import client_names
from rental_calendar.services.occupancy import monthly_stats
from rental_calendar.sources import Sources
from rental_calendar.sources.reservations import ReservationSource

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load calendar data"


@dataclass(frozen=True)
class MonthData:
    """Everything fetched for one month, after fan-in."""

    year: int
    month: int
    reservations: list[Reservation]
    client_names: dict[int, str]


@dataclass(frozen=True)
class NavigationState:
    """What the calendar screen shows after a navigation completed."""

    generation: int
    year: int
    month: int
    view: MonthView | None = None
    stats: MonthlyStats | None = None
    client_names: dict[int, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def fetch_month_reservations(source: ReservationSource, year: int, month: int) -> list[Reservation]:
    """Month-scoped reservations, falling back to the full collection.

    Raises:
        DataUnavailable: when both the scoped and the full fetch fail.
    """
    try:
        scoped = await source.list_by_month(year, month)
    except DataUnavailable:
        logger.warning(
            "Month-scoped fetch for %d-%02d failed; falling back to the full collection",
            year,
            month,
        )
        return merge_reservations([await source.list_all()])
    return merge_reservations([scoped])


async def load_month(sources: Sources, year: int, month: int) -> MonthData:
    """Fetch reservations and client names for a month concurrently."""
    reservations, clients = await asyncio.gather(
        fetch_month_reservations(sources.reservations, year, month),
        sources.clients.list_all(),
    )
    logger.info(
        "Loaded %d reservations and %d clients for %d-%02d",
        len(reservations),
        len(clients),
        year,
        month,
    )
    return MonthData(year=year, month=month, reservations=reservations, client_names=client_names(clients))


class CalendarNavigator:
    """Stateful month navigation for one calendar screen."""

    def __init__(
        self,
        sources: Sources,
        *,
        today: Callable[[], date] = date.today,
        week_start: int = calendar.SUNDAY,
    ) -> None:
        self._sources = sources
        self._today = today
        self._week_start = week_start
        self._issued = 0
        self._applied = 0
        self.year, self.month = current_month(today())
        self.state: NavigationState | None = None

    @property
    def generation(self) -> int:
        """Generation of the state currently shown (0 before the first load)."""
        return self._applied

    async def load(self, year: int, month: int) -> NavigationState | None:
        """Load a month; return its state, or None if a newer one was shown first."""
        self._issued += 1
        generation = self._issued
        # Later relative navigations start from the month most recently requested
        self.year, self.month = year, month

        try:
            data = await load_month(self._sources, year, month)
        except DataUnavailable as e:
            logger.warning("Navigation to %d-%02d failed: %s", year, month, e)
            state = NavigationState(generation=generation, year=year, month=month, error=LOAD_ERROR_MESSAGE)
        else:
            state = NavigationState(
                generation=generation,
                year=year,
                month=month,
                view=build_month(
                    year,
                    month,
                    data.reservations,
                    today=self._today(),
                    week_start=self._week_start,
                ),
                stats=monthly_stats(year, month, data.reservations),
                client_names=data.client_names,
            )
        return self._apply(state)

    def _apply(self, state: NavigationState) -> NavigationState | None:
        if state.generation < self._applied:
            logger.debug(
                "Discarding stale response for %d-%02d (generation %d, showing %d)",
                state.year,
                state.month,
                state.generation,
                self._applied,
            )
            return None
        self._applied = state.generation
        self.state = state
        return state

    async def next(self) -> NavigationState | None:
        return await self.load(*next_month(self.year, self.month))

    async def previous(self) -> NavigationState | None:
        return await self.load(*previous_month(self.year, self.month))

    async def today(self) -> NavigationState | None:
        return await self.load(*current_month(self._today()))

    async def refresh(self) -> NavigationState | None:
        return await self.load(self.year, self.month)
