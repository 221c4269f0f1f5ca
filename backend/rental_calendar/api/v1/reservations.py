"""Reservation booking gate.

A new reservation is only forwarded to the reservation service once every
requested article is known to the catalogue and has enough remaining stock
on every day of the stay.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status

from rental_calendar.api.deps import get_sources
from rental_calendar.errors import DataUnavailable
from rental_calendar.models import Reservation, ReservationItem, ReservationStatus
from rental_calendar.schemas.availability import BookingConflictDetail, BookingRequest
from rental_calendar.services.availability import check_booking, stock_from_articles
from rental_calendar.services.insights import estimate_total_price
from rental_calendar.sources import Sources

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reservations", tags=["reservations"])


def _requested_quantities(body: BookingRequest) -> dict[int, int]:
    """Merge repeated lines of the same article into one quantity."""
    quantities: dict[int, int] = {}
    for item in body.items:
        quantities[item.article_id] = quantities.get(item.article_id, 0) + item.quantity
    return quantities


@router.post(
    "",
    response_model=Reservation,
    status_code=status.HTTP_201_CREATED,
    summary="Create a reservation after checking availability",
)
async def create_reservation(
    body: BookingRequest,
    sources: Sources = Depends(get_sources),
) -> Reservation:
    """Create a pending reservation.

    Validates that:
    - Every article exists in the catalogue.
    - Each requested quantity fits within the remaining stock of the worst
      day of the stay.
    """
    try:
        articles, reservations = await asyncio.gather(
            sources.articles.list_all(),
            sources.reservations.list_all(),
        )
    except DataUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Booking data unavailable ({e.source})",
        ) from e

    quantities = _requested_quantities(body)
    by_id = {a.id: a for a in articles}
    missing = sorted(article_id for article_id in quantities if article_id not in by_id)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Article not found: {', '.join(str(m) for m in missing)}",
        )

    shortages = check_booking(
        quantities, body.start_date, body.end_date, reservations, stock_from_articles(articles)
    )
    if shortages:
        detail = BookingConflictDetail(message="Insufficient stock for the requested dates", shortages=shortages)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail.model_dump(by_alias=True),
        )

    reservation = Reservation(
        client_id=body.client_id,
        start_date=body.start_date,
        end_date=body.end_date,
        status=ReservationStatus.PENDING,
        total_price=estimate_total_price(quantities, articles, body.start_date, body.end_date),
        items=[
            ReservationItem(
                article_id=article_id,
                quantity=quantity,
                unit_price=by_id[article_id].price_per_day or 0,
            )
            for article_id, quantity in quantities.items()
        ],
        created_at=datetime.now(timezone.utc),
        notes=body.notes,
    )

    try:
        created = await sources.reservations.create(reservation)
    except DataUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Reservation service unavailable ({e.source})",
        ) from e

    logger.info("Booked reservation %s for client %s", created.id, created.client_id)
    return created
