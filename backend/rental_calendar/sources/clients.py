"""Client source client: display names for reservations."""

from pydantic import TypeAdapter

from rental_calendar.models import Client
from rental_calendar.sources.base import ApiSource

_client_list = TypeAdapter(list[Client])
_client = TypeAdapter(Client)


class ClientSource(ApiSource):
    name = "clients"

    async def list_all(self) -> list[Client]:
        response = await self._request("GET")
        return self._parse(_client_list, response)

    async def get(self, client_id: int) -> Client | None:
        response = await self._request("GET", f"/{client_id}", allow_not_found=True)
        if response is None:
            return None
        return self._parse(_client, response)
