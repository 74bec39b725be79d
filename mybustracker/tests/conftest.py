"""Shared fixtures: recording transports, a fixed clock and canned payloads."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

from mybustracker.services.codec import WireRequest, WireResponse

API_KEY = "0123456789ABCDEF"
FIXED_NOW = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


class FakeTransport:
    """Blocking transport double returning a canned response and recording requests."""

    def __init__(
        self,
        body: Any = None,
        status_code: int = 200,
        error: Optional[BaseException] = None,
        content: Optional[bytes] = None,
    ):
        self.requests: List[WireRequest] = []
        self.closed = False
        self.error = error
        self.status_code = status_code
        if content is not None:
            self.content = content
        elif body is not None:
            self.content = json.dumps(body).encode("utf-8")
        else:
            self.content = b""

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def send(self, request: WireRequest) -> WireResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return WireResponse(status_code=self.status_code, content=self.content)

    def close(self) -> None:
        self.closed = True


class AsyncFakeTransport(FakeTransport):
    """Awaitable variant of :class:`FakeTransport`."""

    async def send(self, request: WireRequest) -> WireResponse:  # type: ignore[override]
        return FakeTransport.send(self, request)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def fake_transport():
    """Factory for blocking transport doubles."""
    return FakeTransport


@pytest.fixture
def async_fake_transport():
    """Factory for awaitable transport doubles."""
    return AsyncFakeTransport


@pytest.fixture
def bus_times_payload() -> Dict[str, Any]:
    """Departures for stop 36232087 as sent by the service."""
    return {
        "busTimes": [
            {
                "operatorId": "LB",
                "stopId": "36232087",
                "stopName": "Princes Street",
                "refService": "22",
                "mnemoService": "22",
                "nameService": "Gyle Centre - Ocean Terminal",
                "refDest": "4212",
                "nameDest": "Ocean Terminal",
                "timeDatas": [
                    {
                        "day": 0,
                        "time": "09:34",
                        "minutes": 4,
                        "reliability": "H",
                        "type": "N",
                        "terminus": "36232597",
                        "journeyId": "3024",
                        "busId": "571",
                    },
                    {
                        "day": 0,
                        "time": "09:42",
                        "minutes": 12,
                        "reliability": "T",
                        "type": "N",
                        "terminus": "36232597",
                        "journeyId": "3025",
                    },
                ],
                "globalDisruption": False,
                "serviceDisruption": False,
                "busStopDisruption": False,
                "serviceDiversion": False,
            },
            {
                "operatorId": "LB",
                "stopId": "36232087",
                "stopName": "Princes Street",
                "refService": "25",
                "mnemoService": "25",
                "nameService": "Heriot-Watt - Restalrig",
                "refDest": "4310",
                "nameDest": "Restalrig",
                "timeDatas": [
                    {
                        "day": 0,
                        "time": "09:37",
                        "minutes": 7,
                        "reliability": "F",
                        "type": "D",
                        "terminus": "36234877",
                        "journeyId": "1188",
                        "busId": "402",
                    },
                ],
                "globalDisruption": False,
                "serviceDisruption": True,
                "busStopDisruption": False,
                "serviceDiversion": False,
            },
        ]
    }


@pytest.fixture
def services_payload() -> Dict[str, Any]:
    return {
        "services": [
            {
                "ref": "22",
                "operatorId": "LB",
                "mnemo": "22",
                "name": "Gyle Centre - Ocean Terminal",
                "dests": ["4212", "4213"],
            },
            {
                "ref": "N22",
                "operatorId": "LB",
                "mnemo": "N22",
                "name": "Night service",
                "dests": ["4899"],
            },
        ]
    }


@pytest.fixture
def journey_times_payload() -> Dict[str, Any]:
    return {
        "journeyTimes": [
            {
                "journeyId": "3024",
                "busId": "571",
                "operatorId": "LB",
                "refService": "22",
                "mnemoService": "22",
                "nameService": "Gyle Centre - Ocean Terminal",
                "refDest": "4212",
                "nameDest": "Ocean Terminal",
                "journeyTimeDatas": [
                    {
                        "order": 1,
                        "stopId": "36232087",
                        "stopName": "Princes Street",
                        "day": 0,
                        "time": "09:34",
                        "minutes": 4,
                        "reliability": "H",
                        "type": "N",
                        "busStopDisruption": False,
                    },
                    {
                        "order": 2,
                        "stopId": "36232597",
                        "stopName": "Ocean Terminal",
                        "day": 0,
                        "time": "09:58",
                        "minutes": 28,
                        "reliability": "T",
                        "type": "D",
                        "busStopDisruption": True,
                    },
                ],
                "globalDisruption": False,
                "serviceDisruption": False,
                "serviceDiversion": False,
            }
        ]
    }
