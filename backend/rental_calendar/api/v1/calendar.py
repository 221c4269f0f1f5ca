"""Calendar API router: month grids, monthly statistics and exports.

Every endpoint fetches its data from the collaborator services, then hands
it to the pure builders in ``rental_calendar.services``. A failed fetch is
reported as ``502`` rather than rendered as an empty month.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from rental_calendar.api.deps import get_sources, get_today
from rental_calendar.config import settings
from rental_calendar.errors import DataUnavailable
from rental_calendar.navigation import MonthData, load_month
from rental_calendar.schemas.calendar import (
    CalendarResponse,
    ClientReservation,
    DayDetail,
    MonthlyReport,
    MonthlyStats,
    UpcomingResponse,
)
from rental_calendar.services.calendar_grid import build_month, reservations_for_day
from rental_calendar.services.insights import (
    client_name,
    client_names,
    day_badges,
    monthly_report,
    revenue_tier,
    upcoming_reservations,
)
from rental_calendar.services.occupancy import monthly_stats
from rental_calendar.services.revenue import day_revenue
from rental_calendar.sources import Sources

router = APIRouter(prefix="/api/v1/calendar", tags=["calendar"])

Year = Annotated[int, Path(ge=1, le=9999, description="Calendar year")]
Month = Annotated[int, Path(ge=1, le=12, description="Month (1-12)")]
Day = Annotated[int, Path(ge=1, le=31, description="Day of the month")]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _load_month_or_502(sources: Sources, year: int, month: int) -> MonthData:
    """Fetch a month's data, raising ``HTTPException 502`` when it is unavailable."""
    try:
        return await load_month(sources, year, month)
    except DataUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Calendar data unavailable ({e.source})",
        ) from e


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/upcoming", response_model=UpcomingResponse, summary="Next upcoming reservations")
async def get_upcoming(
    limit: int = Query(settings.upcoming_limit, ge=1, le=50),
    sources: Sources = Depends(get_sources),
    today: date = Depends(get_today),
) -> UpcomingResponse:
    """Non-cancelled reservations starting today or later, soonest first."""
    try:
        reservations, clients = await asyncio.gather(
            sources.reservations.list_all(),
            sources.clients.list_all(),
        )
    except DataUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Calendar data unavailable ({e.source})",
        ) from e

    names = client_names(clients)
    items = [
        ClientReservation(reservation=r, client_name=client_name(names, r.client_id))
        for r in upcoming_reservations(reservations, today=today, limit=limit)
    ]
    return UpcomingResponse(items=items, total=len(items))


@router.get("/{year}/{month}", response_model=CalendarResponse, summary="Month grid with statistics")
async def get_month(
    year: Year,
    month: Month,
    sources: Sources = Depends(get_sources),
    today: date = Depends(get_today),
) -> CalendarResponse:
    """Build the week-aligned grid of a month along with its statistics.

    Reservations come from the month-scoped query, or from the full
    collection when that query fails.
    """
    data = await _load_month_or_502(sources, year, month)
    view = build_month(year, month, data.reservations, today=today, week_start=settings.week_start)
    return CalendarResponse(
        view=view,
        stats=monthly_stats(year, month, data.reservations),
        client_names=data.client_names,
        badges=day_badges(
            view,
            settings.revenue_badge_low,
            settings.revenue_badge_high,
            settings.visible_reservations_per_day,
        ),
    )


@router.get("/{year}/{month}/stats", response_model=MonthlyStats, summary="Monthly statistics")
async def get_month_stats(
    year: Year,
    month: Month,
    sources: Sources = Depends(get_sources),
) -> MonthlyStats:
    data = await _load_month_or_502(sources, year, month)
    return monthly_stats(year, month, data.reservations)


@router.get("/{year}/{month}/report", response_model=MonthlyReport, summary="Monthly export payload")
async def get_month_report(
    year: Year,
    month: Month,
    sources: Sources = Depends(get_sources),
) -> MonthlyReport:
    """Stats plus the reservations attributed to the month (by start date)."""
    data = await _load_month_or_502(sources, year, month)
    return monthly_report(year, month, data.reservations, settings.currency)


@router.get("/{year}/{month}/{day}", response_model=DayDetail, summary="All reservations of one day")
async def get_day(
    year: Year,
    month: Month,
    day: Day,
    sources: Sources = Depends(get_sources),
) -> DayDetail:
    try:
        target = date(year, month, day)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    data = await _load_month_or_502(sources, year, month)
    reservations = reservations_for_day(target, data.reservations)
    revenue = day_revenue(target, reservations)
    return DayDetail(
        date=target,
        revenue=revenue,
        revenue_tier=revenue_tier(revenue, settings.revenue_badge_low, settings.revenue_badge_high),
        reservations=[
            ClientReservation(reservation=r, client_name=client_name(data.client_names, r.client_id))
            for r in reservations
        ],
    )
