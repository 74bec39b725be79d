"""Transports performing the HTTP exchange with the web service."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from ..config import settings
from .codec import WireRequest, WireResponse

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Blocking transport.

    ``send`` returns the raw response whatever its status code. Network level
    faults are raised as ``OSError``, ``httpx.RequestError`` or
    ``TransportFailure``.
    """

    def send(self, request: WireRequest) -> WireResponse:
        ...

    def close(self) -> None:
        ...


class AsyncTransport(Protocol):
    """Awaitable counterpart of :class:`Transport`."""

    async def send(self, request: WireRequest) -> WireResponse:
        ...

    async def aclose(self) -> None:
        ...


def _to_wire_response(response: httpx.Response) -> WireResponse:
    return WireResponse(
        status_code=response.status_code,
        content=response.content,
        headers=dict(response.headers),
    )


class HttpxTransport:
    """Transport backed by a shared ``httpx.Client``."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout if timeout is not None else settings.timeout_seconds)
        )

    def send(self, request: WireRequest) -> WireResponse:
        logger.debug("HTTP %s %s", request.method, request.redacted_url)
        response = self._client.request(request.method, request.url, headers=dict(request.headers))
        return _to_wire_response(response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncHttpxTransport:
    """Transport backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout if timeout is not None else settings.timeout_seconds)
        )

    async def send(self, request: WireRequest) -> WireResponse:
        logger.debug("HTTP %s %s", request.method, request.redacted_url)
        response = await self._client.request(request.method, request.url, headers=dict(request.headers))
        return _to_wire_response(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
