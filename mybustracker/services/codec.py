"""Translation between typed request parameters and the web service wire format.

Both directions are pure: ``encode`` depends only on its arguments (the
current time is passed in explicitly) and ``decode`` maps every possible
response body to either a record or an :class:`ApiError`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

import httpx
from pydantic import ValidationError

from ..config import settings
from ..models import (
    BusStops,
    BusTimes,
    Destinations,
    DiversionPoints,
    Diversions,
    Disruptions,
    JourneyTimes,
    Record,
    ServicePoints,
    Services,
    TopoId,
)
from ..models.requests import (
    BusId,
    GetBusStops,
    GetBusTimes,
    GetDestinations,
    GetDisruptions,
    GetDiversionPoints,
    GetDiversions,
    GetJourneyTimes,
    GetServicePoints,
    GetServices,
    GetTopoId,
    JourneyId,
    RequestParams,
)
from .api_key import ApiKey
from .errors import AuthenticationFailure, DecodeError, InvalidParameter, RemoteError

# Fault codes the service uses when it does not accept the key
AUTH_FAULT_CODES = frozenset({"INVALID_KEY", "INVALID_APP_KEY"})

_REDACTED = "****"

QueryPairs = List[Tuple[str, str]]


@dataclass(frozen=True)
class WireRequest:
    """A fully built HTTP request, ready for a transport."""

    function: str
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def redacted_url(self) -> str:
        """The request URL with the API key masked, safe for logs."""
        url = httpx.URL(self.url)
        if "key" not in url.params:
            return self.url
        return str(url.copy_set_param("key", _REDACTED))


@dataclass(frozen=True)
class WireResponse:
    """Raw outcome of a transport exchange."""

    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


# Encoding -------------------------------------------------------------------


def _operator_only(params) -> QueryPairs:
    return [("operatorId", params.operator.value)]


def _service_points(params: GetServicePoints) -> QueryPairs:
    return [("operatorId", params.operator.value), ("ref", params.service_reference)]


def _disruptions(params: GetDisruptions) -> QueryPairs:
    return [("operatorId", params.operator.value), ("type", str(int(params.disruption_type)))]


def _diversions(params: GetDiversions) -> QueryPairs:
    return [
        ("operatorId", params.operator.value),
        ("refService", params.service_reference or "0"),
        ("day", str(params.day_offset)),
    ]


def _diversion_points(params: GetDiversionPoints) -> QueryPairs:
    return [("operatorId", params.operator.value), ("diversionId", params.diversion_id)]


def _bus_times(params: GetBusTimes) -> QueryPairs:
    pairs: QueryPairs = []
    for index, timetable in enumerate(params.timetables, start=1):
        pairs.append((f"stopId{index}", timetable.stop_id))
        pairs.append((f"refService{index}", timetable.service_reference))
        pairs.append((f"refDest{index}", timetable.destination_reference))
    pairs.append(("nb", str(params.departure_count)))
    pairs.append(("day", str(params.day_offset)))
    if params.departure_time is not None:
        pairs.append(("time", params.departure_time.strftime("%H:%M")))
    return pairs


def _journey_times(params: GetJourneyTimes) -> QueryPairs:
    pairs: QueryPairs = []
    if params.stop_id is not None:
        pairs.append(("stopId", params.stop_id))
    if isinstance(params.journey, JourneyId):
        pairs.append(("journeyId", params.journey.value))
    elif isinstance(params.journey, BusId):
        pairs.append(("busId", params.journey.value))
    else:
        raise TypeError(f"Unsupported journey identifier: {params.journey!r}")
    pairs.append(("operator", params.operator.value))
    pairs.append(("day", str(params.day_offset)))
    pairs.append(("mode", params.mode.value))
    return pairs


@dataclass(frozen=True)
class Operation:
    """Wire contract of one remote operation."""

    function: str
    encode: Callable[[Any], QueryPairs]
    record: Type[Record]


OPERATIONS: Dict[type, Operation] = {
    GetTopoId: Operation("getTopoId", _operator_only, TopoId),
    GetServices: Operation("getServices", _operator_only, Services),
    GetServicePoints: Operation("getServicePoints", _service_points, ServicePoints),
    GetDestinations: Operation("getDests", _operator_only, Destinations),
    GetBusStops: Operation("getBusStops", _operator_only, BusStops),
    GetDisruptions: Operation("getDisruptions", _disruptions, Disruptions),
    GetDiversions: Operation("getDiversions", _diversions, Diversions),
    GetDiversionPoints: Operation("getDiversionPoints", _diversion_points, DiversionPoints),
    GetBusTimes: Operation("getBusTimes", _bus_times, BusTimes),
    GetJourneyTimes: Operation("getJourneyTimes", _journey_times, JourneyTimes),
}


def operation_for(params: RequestParams) -> Operation:
    """Look up the wire contract for a parameter value."""
    try:
        return OPERATIONS[type(params)]
    except KeyError:
        raise TypeError(f"Unsupported request parameters: {type(params).__name__}") from None


def encode(
    params: RequestParams,
    api_key: ApiKey,
    endpoint: str,
    *,
    now: datetime,
    user_agent: Optional[str] = None,
) -> WireRequest:
    """
    Build the wire request for ``params``.

    The query string keeps any parameters already present on ``endpoint``,
    followed by the derived key, the function name and the operation's own
    parameters.

    Args:
        params: Validated operation parameters
        api_key: Developer key, derived for the hour of ``now``
        endpoint: Base URL of the web service
        now: Instant the request is made at
        user_agent: Optional User-Agent override

    Returns:
        WireRequest for a transport to send

    Raises:
        InvalidParameter: ``endpoint`` is not a valid URL
    """
    operation = operation_for(params)
    query: QueryPairs = [("key", api_key.derive(now)), ("function", operation.function)]
    query.extend(operation.encode(params))

    try:
        url = httpx.URL(endpoint).copy_merge_params(query)
    except httpx.InvalidURL as exc:
        raise InvalidParameter("endpoint", f"Invalid endpoint URL: {exc}") from None
    return WireRequest(
        function=operation.function,
        method="GET",
        url=str(url),
        headers={"User-Agent": user_agent or settings.user_agent},
    )


# Decoding -------------------------------------------------------------------


def _describe(value: Any) -> str:
    if isinstance(value, dict):
        keys = ", ".join(sorted(str(key) for key in value)[:10])
        return f"object with keys [{keys}]"
    if isinstance(value, list):
        return f"array of {len(value)} items"
    return type(value).__name__


def _load_json(content: bytes) -> Any:
    if not content or not content.strip():
        raise ValueError("empty response body")
    try:
        return json.loads(content)
    except RecursionError as exc:
        raise ValueError("response body is nested too deeply") from exc


def _fault(payload: Any) -> Optional[Tuple[str, str]]:
    if isinstance(payload, dict) and "faultcode" in payload:
        return str(payload["faultcode"]), str(payload.get("faultstring", ""))
    return None


def decode(response: WireResponse, params: RequestParams) -> Record:
    """
    Turn a raw response into the record expected for ``params``.

    Raises:
        AuthenticationFailure: The service rejected the API key
        RemoteError: The service reported any other error
        DecodeError: The body does not match the expected record
    """
    record_type = operation_for(params).record
    expected = record_type.__name__

    payload: Any = None
    parse_error: Optional[str] = None
    try:
        payload = _load_json(response.content)
    except ValueError as exc:
        parse_error = str(exc)

    fault = _fault(payload)
    if fault is not None:
        code, message = fault
        if code in AUTH_FAULT_CODES:
            raise AuthenticationFailure(code, message)
        raise RemoteError(code, message)

    if response.status_code in (401, 403):
        raise AuthenticationFailure(f"HTTP_{response.status_code}", response.content.decode("utf-8", "replace"))

    if not response.is_success:
        raise RemoteError(f"HTTP_{response.status_code}", response.content.decode("utf-8", "replace"))

    if parse_error is not None:
        raise DecodeError(expected, f"body is not valid JSON ({parse_error})")

    if not isinstance(payload, dict):
        raise DecodeError(expected, f"expected a JSON object, got {_describe(payload)}")

    try:
        return record_type.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(expected, f"{_describe(payload)} does not match: {exc}") from exc
