"""HTTP clients for the collaborator services the calendar reads from."""

from dataclasses import dataclass

import httpx

from rental_calendar.config import Settings
from rental_calendar.sources.articles import ArticleSource
from rental_calendar.sources.clients import ClientSource
from rental_calendar.sources.reservations import ReservationSource


@dataclass(frozen=True)
class Sources:
    """The three collaborators a navigation or booking reads from."""

    reservations: ReservationSource
    articles: ArticleSource
    clients: ClientSource


def build_sources(settings: Settings, client: httpx.AsyncClient | None = None) -> Sources:
    """Create clients for the configured collaborator URLs, optionally sharing one connection pool."""
    timeout = settings.request_timeout_seconds
    return Sources(
        reservations=ReservationSource(settings.reservations_api_url, client, timeout),
        articles=ArticleSource(settings.articles_api_url, client, timeout),
        clients=ClientSource(settings.clients_api_url, client, timeout),
    )


__all__ = [
    "ArticleSource",
    "ClientSource",
    "ReservationSource",
    "Sources",
    "build_sources",
]
