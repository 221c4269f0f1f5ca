"""Shared test configuration and fixtures.

The calendar engine is pure, so most tests only need the reservation
factory. Navigation and API tests run against in-memory fake sources that
can be told to fail or to hold a response until released.
"""

import asyncio
import itertools
from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from rental_calendar.api.deps import get_sources, get_today
from rental_calendar.errors import DataUnavailable
from rental_calendar.main import app
from rental_calendar.models import Article, Client, Reservation, ReservationItem, ReservationStatus
from rental_calendar.sources import Sources

TODAY = date(2024, 3, 15)


# ---------------------------------------------------------------------------
# Reservation factory
# ---------------------------------------------------------------------------


@pytest.fixture
def make_reservation():
    """Build reservations with sequential ids unless one is given."""
    ids = itertools.count(1)

    def _make(
        start: date,
        end: date,
        *,
        total_price: str | int = 0,
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        items: dict[int, int] | None = None,
        id: int | None = None,
        client_id: int = 1,
    ) -> Reservation:
        return Reservation(
            id=id if id is not None else next(ids),
            client_id=client_id,
            start_date=start,
            end_date=end,
            status=status,
            total_price=Decimal(str(total_price)),
            items=[ReservationItem(article_id=a, quantity=q) for a, q in (items or {}).items()],
        )

    return _make


# ---------------------------------------------------------------------------
# Fake collaborator sources
# ---------------------------------------------------------------------------


class FakeReservationSource:
    """In-memory reservation source with switchable failures."""

    name = "reservations"

    def __init__(self, reservations: list[Reservation] | None = None) -> None:
        self.reservations = list(reservations or [])
        self.by_month: list[Reservation] | None = None
        self.fail_by_month = False
        self.fail_all = False
        self.gates: dict[tuple[int, int], asyncio.Event] = {}
        self.created: list[Reservation] = []
        self.calls: list[str] = []

    async def list_by_month(self, year: int, month: int) -> list[Reservation]:
        self.calls.append(f"by_month:{year}-{month}")
        gate = self.gates.get((year, month))
        if gate is not None:
            await gate.wait()
        if self.fail_by_month:
            raise DataUnavailable(self.name, "month query failed")
        if self.by_month is not None:
            return list(self.by_month)
        return list(self.reservations)

    async def list_all(self) -> list[Reservation]:
        self.calls.append("all")
        if self.fail_all:
            raise DataUnavailable(self.name, "full query failed")
        return list(self.reservations)

    async def create(self, reservation: Reservation) -> Reservation:
        created = reservation.model_copy(update={"id": 1000 + len(self.created)})
        self.created.append(created)
        return created


class FakeArticleSource:
    name = "articles"

    def __init__(self, articles: list[Article] | None = None) -> None:
        self.articles = list(articles or [])
        self.fail = False

    async def list_all(self) -> list[Article]:
        if self.fail:
            raise DataUnavailable(self.name, "catalogue unavailable")
        return list(self.articles)


class FakeClientSource:
    name = "clients"

    def __init__(self, clients: list[Client] | None = None) -> None:
        self.clients = list(clients or [])
        self.fail = False

    async def list_all(self) -> list[Client]:
        if self.fail:
            raise DataUnavailable(self.name, "clients unavailable")
        return list(self.clients)


@pytest.fixture
def fake_sources() -> Sources:
    """Sources pre-loaded with two articles and two clients, no reservations."""
    return Sources(
        reservations=FakeReservationSource(),
        articles=FakeArticleSource(
            [
                Article(id=1, name="Chair", quantity_total=100, price_per_day=Decimal("50")),
                Article(id=2, name="Tent", quantity_total=5, price_per_day=Decimal("2000")),
                Article(id=3, name="Old stage", quantity_total=1, is_active=False),
            ]
        ),
        clients=FakeClientSource(
            [
                Client(id=1, name="Amina Bensalem"),
                Client(id=2, name="Karim Haddad"),
            ]
        ),
    )


# ---------------------------------------------------------------------------
# HTTP client wired to the fake sources
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client(fake_sources: Sources) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient with sources and "today" overridden."""
    app.dependency_overrides[get_sources] = lambda: fake_sources
    app.dependency_overrides[get_today] = lambda: TODAY

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()
