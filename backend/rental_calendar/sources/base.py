"""Shared plumbing for the HTTP collaborator clients."""

import logging
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import TypeAdapter

from rental_calendar.errors import DataUnavailable

logger = logging.getLogger(__name__)


class ApiSource:
    """Thin async JSON client bound to one collaborator base URL.

    Every transport failure, error status or malformed body surfaces as
    ``DataUnavailable``; records are validated into domain models before they
    leave this class.
    """

    name = "api"

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        if self._client is not None:
            return await self._client.request(method, url, timeout=self._timeout, **kwargs)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.request(method, url, **kwargs)

    async def _request(
        self,
        method: str,
        path: str = "",
        *,
        allow_not_found: bool = False,
        **kwargs: Any,
    ) -> httpx.Response | None:
        """Send a request; return None on 404 when ``allow_not_found``."""
        try:
            response = await self._send(method, path, **kwargs)
            if allow_not_found and response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("%s %s%s failed", method, self.name, path, exc_info=True)
            raise DataUnavailable(self.name, str(e) or type(e).__name__) from e
        return response

    def _parse(
        self,
        adapter: TypeAdapter,
        response: httpx.Response,
        unwrap: Callable[[Any], Any] | None = None,
    ) -> Any:
        try:
            payload = response.json()
            if unwrap is not None:
                payload = unwrap(payload)
            return adapter.validate_python(payload)
        except ValueError as e:
            logger.warning("%s returned a malformed payload: %s", self.name, e)
            raise DataUnavailable(self.name, "malformed payload") from e
