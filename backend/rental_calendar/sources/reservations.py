"""Reservation source client: list, fetch and mutate reservations."""

import logging
from typing import Any

from pydantic import TypeAdapter

from rental_calendar.models import Reservation
from rental_calendar.sources.base import ApiSource

logger = logging.getLogger(__name__)

_reservation_list = TypeAdapter(list[Reservation])
_reservation = TypeAdapter(Reservation)


def _unwrap(payload: Any) -> Any:
    """Calendar endpoints wrap the list as ``{"reservations": [...]}``."""
    if isinstance(payload, dict) and "reservations" in payload:
        return payload["reservations"]
    return payload


def _to_payload(reservation: Reservation) -> dict:
    return reservation.model_dump(mode="json", by_alias=True, exclude_none=True)


class ReservationSource(ApiSource):
    """Client for the reservation service."""

    name = "reservations"

    async def list_all(self) -> list[Reservation]:
        response = await self._request("GET")
        return self._parse(_reservation_list, response)

    async def list_by_month(self, year: int, month: int) -> list[Reservation]:
        """Reservations touching a 1-based month."""
        response = await self._request("GET", f"/calendar/{year}/{month}")
        return self._parse(_reservation_list, response, unwrap=_unwrap)

    async def list_by_client(self, client_id: int) -> list[Reservation]:
        response = await self._request("GET", f"/client/{client_id}")
        return self._parse(_reservation_list, response)

    async def get(self, reservation_id: int) -> Reservation | None:
        response = await self._request("GET", f"/{reservation_id}", allow_not_found=True)
        if response is None:
            return None
        return self._parse(_reservation, response)

    async def create(self, reservation: Reservation) -> Reservation:
        response = await self._request("POST", json=_to_payload(reservation))
        created = self._parse(_reservation, response)
        logger.info("Created reservation %s for client %s", created.id, created.client_id)
        return created

    async def update(self, reservation_id: int, reservation: Reservation) -> None:
        await self._request("PUT", f"/{reservation_id}", json=_to_payload(reservation))
        logger.info("Updated reservation %s", reservation_id)

    async def delete(self, reservation_id: int) -> None:
        await self._request("DELETE", f"/{reservation_id}")
        logger.info("Deleted reservation %s", reservation_id)
