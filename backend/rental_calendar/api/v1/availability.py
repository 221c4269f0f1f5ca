"""Availability API router: remaining article stock over a date window."""

from __future__ import annotations

import asyncio
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from rental_calendar.api.deps import get_sources
from rental_calendar.errors import DataUnavailable
from rental_calendar.schemas.availability import AvailabilityResponse
from rental_calendar.services.availability import describe_availability
from rental_calendar.sources import Sources

router = APIRouter(prefix="/api/v1/availability", tags=["availability"])


@router.get("", response_model=AvailabilityResponse, summary="Article availability over a date window")
async def get_availability(
    start: date = Query(..., description="First day of the window (inclusive)"),
    end: date = Query(..., description="Last day of the window (inclusive)"),
    article_id: list[int] | None = Query(None, description="Articles to check; all active articles when omitted"),
    sources: Sources = Depends(get_sources),
) -> AvailabilityResponse:
    """Minimum remaining quantity per article across every day of the window.

    Articles the catalogue does not know come back with
    ``quantityAvailable: null`` rather than ``0``.
    """
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end must not be before start",
        )

    try:
        articles, reservations = await asyncio.gather(
            sources.articles.list_all(),
            sources.reservations.list_all(),
        )
    except DataUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Availability data unavailable ({e.source})",
        ) from e

    article_ids = article_id or [a.id for a in articles if a.is_active]
    return AvailabilityResponse(
        start_date=start,
        end_date=end,
        articles=describe_availability(articles, article_ids, start, end, reservations),
    )
