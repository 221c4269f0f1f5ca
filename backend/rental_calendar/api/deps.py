"""Shared API dependencies: single import point for all routers.

Routers import everything they need from one place::

    from rental_calendar.api.deps import get_sources, get_today
"""

from datetime import date

from fastapi import Request

from rental_calendar.config import settings
from rental_calendar.sources import Sources, build_sources


def get_sources(request: Request) -> Sources:
    """Collaborator clients sharing the application's HTTP connection pool."""
    client = getattr(request.app.state, "http_client", None)
    return build_sources(settings, client)


def get_today() -> date:
    """The "now" reference used for ``is_today`` and upcoming lists."""
    return date.today()


__all__ = [
    "get_sources",
    "get_today",
]
