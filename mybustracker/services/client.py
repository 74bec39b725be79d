"""My Bus Tracker client for fetching real-time bus data."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Callable, Iterable, Optional, Type, TypeVar, Union

import httpx

from ..config import settings
from ..models import (
    BusStops,
    BusTimes,
    Destinations,
    DiversionPoints,
    Diversions,
    Disruptions,
    DisruptionType,
    JourneyTimeMode,
    JourneyTimes,
    Operator,
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
    JourneyIdentifier,
    RequestParams,
    Timetable,
)
from .api_key import ApiKey
from .codec import WireRequest, WireResponse, decode, encode
from .errors import (
    ApiError,
    DateOutOfBounds,
    InvalidParameter,
    TooManyDepartures,
    TooManyTimetables,
    TransportFailure,
)
from .transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport

logger = logging.getLogger(__name__)

MAX_TIMETABLES = 5
MAX_DEPARTURES = 10
DEFAULT_DEPARTURES = 2
MAX_DAYS_AHEAD = 3

_TRANSPORT_ERRORS = (OSError, httpx.RequestError)

E = TypeVar("E", bound=Enum)
OperatorLike = Union[Operator, str]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are read as UTC, as in ApiKey.derive
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _utc_date(moment: datetime) -> date:
    return _as_utc(moment).date()


# Validation -----------------------------------------------------------------


def _parse_endpoint(endpoint: str) -> httpx.URL:
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidParameter("endpoint", f"Invalid endpoint URL: {exc}") from None
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidParameter("endpoint", f"Endpoint must be an absolute http(s) URL, got {endpoint!r}")
    return url


def _require_identifier(parameter: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameter(parameter, f"'{parameter}' must be a non-empty string")
    return value.strip()


def _coerce(enum_type: Type[E], value: object, parameter: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidParameter(parameter, f"Unknown {parameter}: {value!r}") from None


def _day_offset(day: Optional[date], today: date) -> int:
    """Number of days between today and ``day``; the service only looks three days ahead."""
    if day is None:
        return 0
    if isinstance(day, datetime):
        day = _utc_date(day)
    if not isinstance(day, date):
        raise InvalidParameter("day", f"'day' must be a date, got {type(day).__name__}")
    offset = (day - today).days
    if offset < 0 or offset > MAX_DAYS_AHEAD:
        raise DateOutOfBounds()
    return offset


def _validate_timetables(timetables: Iterable[Timetable]) -> tuple:
    if isinstance(timetables, Timetable):
        timetables = (timetables,)
    try:
        items = tuple(timetables)
    except TypeError:
        raise InvalidParameter("timetables", "'timetables' must be a sequence of Timetable") from None
    if not items:
        raise InvalidParameter("timetables", "At least one timetable is required")
    if len(items) > MAX_TIMETABLES:
        raise TooManyTimetables(len(items))

    validated = []
    for index, item in enumerate(items):
        if not isinstance(item, Timetable):
            raise InvalidParameter(f"timetables[{index}]", f"Expected a Timetable, got {type(item).__name__}")
        validated.append(
            Timetable(
                stop_id=_require_identifier(f"timetables[{index}].stop_id", item.stop_id),
                service_reference=_require_identifier(
                    f"timetables[{index}].service_reference", item.service_reference
                ),
                destination_reference=_require_identifier(
                    f"timetables[{index}].destination_reference", item.destination_reference
                ),
                operator=_coerce(Operator, item.operator, f"timetables[{index}].operator"),
            )
        )
    return tuple(validated)


def _validate_departure_count(count: object) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidParameter("departure_count", "'departure_count' must be an integer")
    if count > MAX_DEPARTURES:
        raise TooManyDepartures(count)
    if count < 1:
        raise InvalidParameter("departure_count", "At least one departure must be requested")
    return count


def _validate_journey(journey: object) -> JourneyIdentifier:
    if isinstance(journey, JourneyId):
        return JourneyId(_require_identifier("journey", journey.value))
    if isinstance(journey, BusId):
        return BusId(_require_identifier("journey", journey.value))
    raise InvalidParameter("journey", "'journey' must be a JourneyId or a BusId")


class _BaseClient:
    """Configuration and parameter handling shared by the blocking and async clients."""

    def __init__(
        self,
        api_key: Union[ApiKey, str, None] = None,
        endpoint: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if api_key is None:
            if not settings.has_api_key:
                raise InvalidParameter("api_key", "No API key given and MYBUSTRACKER_API_KEY is not set")
            api_key = settings.api_key
        self._api_key = api_key if isinstance(api_key, ApiKey) else ApiKey(api_key)
        self.endpoint = str(_parse_endpoint(endpoint or settings.base_url))
        self.user_agent = settings.user_agent
        self._clock = clock or _utc_now

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"

    # Parameter builders -----------------------------------------------------

    @staticmethod
    def _service_points_params(service_reference: str, operator: OperatorLike) -> GetServicePoints:
        return GetServicePoints(
            service_reference=_require_identifier("service_reference", service_reference),
            operator=_coerce(Operator, operator, "operator"),
        )

    @staticmethod
    def _disruptions_params(
        disruption_type: Union[DisruptionType, int, None],
        operator: OperatorLike,
    ) -> GetDisruptions:
        return GetDisruptions(
            operator=_coerce(Operator, operator, "operator"),
            disruption_type=DisruptionType.ALL
            if disruption_type is None
            else _coerce(DisruptionType, disruption_type, "disruption_type"),
        )

    @staticmethod
    def _diversions_params(
        service_reference: Optional[str],
        day: Optional[date],
        operator: OperatorLike,
        today: date,
    ) -> GetDiversions:
        if service_reference is not None:
            service_reference = _require_identifier("service_reference", service_reference)
        return GetDiversions(
            operator=_coerce(Operator, operator, "operator"),
            service_reference=service_reference,
            day_offset=_day_offset(day, today),
        )

    @staticmethod
    def _diversion_points_params(diversion_id: str, operator: OperatorLike) -> GetDiversionPoints:
        return GetDiversionPoints(
            diversion_id=_require_identifier("diversion_id", diversion_id),
            operator=_coerce(Operator, operator, "operator"),
        )

    @staticmethod
    def _bus_times_params(
        timetables: Iterable[Timetable],
        departure_count: int,
        day: Optional[date],
        departure_time: Optional[time],
        today: date,
    ) -> GetBusTimes:
        if departure_time is not None and not isinstance(departure_time, time):
            raise InvalidParameter("departure_time", "'departure_time' must be a datetime.time")
        return GetBusTimes(
            timetables=_validate_timetables(timetables),
            departure_count=_validate_departure_count(departure_count),
            day_offset=_day_offset(day, today),
            departure_time=departure_time,
        )

    @staticmethod
    def _journey_times_params(
        journey: JourneyIdentifier,
        stop_id: Optional[str],
        operator: OperatorLike,
        day: Optional[date],
        mode: Union[JourneyTimeMode, str],
        today: date,
    ) -> GetJourneyTimes:
        journey = _validate_journey(journey)
        if stop_id is not None:
            stop_id = _require_identifier("stop_id", stop_id)
        elif isinstance(journey, JourneyId):
            raise InvalidParameter("stop_id", "A stop id is required when querying by journey id")
        return GetJourneyTimes(
            journey=journey,
            operator=_coerce(Operator, operator, "operator"),
            stop_id=stop_id,
            day_offset=_day_offset(day, today),
            mode=_coerce(JourneyTimeMode, mode, "mode"),
        )

    # Wire handling ----------------------------------------------------------

    def _encode(self, params: RequestParams, now: datetime) -> WireRequest:
        request = encode(params, self._api_key, self.endpoint, now=now, user_agent=self.user_agent)
        logger.debug("Calling %s: %s", request.function, request.redacted_url)
        return request

    @staticmethod
    def _transport_failure(request: WireRequest, exc: BaseException) -> TransportFailure:
        logger.warning("Transport failure calling %s: %s", request.function, exc)
        return TransportFailure(exc)

    @staticmethod
    def _decode(request: WireRequest, response: WireResponse, params: RequestParams) -> Record:
        try:
            return decode(response, params)
        except ApiError as exc:
            logger.warning("%s failed (HTTP %s): %s", request.function, response.status_code, exc)
            raise


class MyBusTracker(_BaseClient):
    """
    Blocking client for the My Bus Tracker web service.

    Typically one instance is created for the whole application. The client
    holds no mutable state after construction, so calls may be issued from
    several threads at once.

    Every method performs exactly one HTTP request and returns the record for
    that operation, or raises an :class:`ApiError` subclass.
    """

    def __init__(
        self,
        api_key: Union[ApiKey, str, None] = None,
        endpoint: Optional[str] = None,
        transport: Optional[Transport] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(api_key=api_key, endpoint=endpoint, clock=clock)
        self._transport = transport or HttpxTransport()

    def __enter__(self) -> "MyBusTracker":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying transport."""
        self._transport.close()

    def _call(self, params: RequestParams, now: datetime) -> Record:
        request = self._encode(params, now)
        try:
            response = self._transport.send(request)
        except TransportFailure:
            raise
        except _TRANSPORT_ERRORS as exc:
            raise self._transport_failure(request, exc) from exc
        return self._decode(request, response, params)

    # Topological web service ------------------------------------------------

    def get_topo_id(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> TopoId:
        """
        Get the ID of the topology version in use.

        The ID is generated once per day server-side and only changes when the
        topology does. It is not cached: every call hits the service.
        """
        return self._call(GetTopoId(_coerce(Operator, operator, "operator")), self._clock())

    def get_services(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> Services:
        """Get the list of services in operation."""
        return self._call(GetServices(_coerce(Operator, operator, "operator")), self._clock())

    def get_service_points(
        self,
        service_reference: str,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> ServicePoints:
        """Get the route of a service, for plotting on a map."""
        return self._call(self._service_points_params(service_reference, operator), self._clock())

    def get_destinations(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> Destinations:
        """Get the list of service destinations."""
        return self._call(GetDestinations(_coerce(Operator, operator, "operator")), self._clock())

    def get_bus_stops(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> BusStops:
        """Get the list of bus stops."""
        return self._call(GetBusStops(_coerce(Operator, operator, "operator")), self._clock())

    # Disruptions web service ------------------------------------------------

    def get_disruptions(
        self,
        disruption_type: Union[DisruptionType, int, None] = None,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> Disruptions:
        """Get ongoing disruptions, optionally of a single type."""
        return self._call(self._disruptions_params(disruption_type, operator), self._clock())

    def get_diversions(
        self,
        service_reference: Optional[str] = None,
        day: Optional[date] = None,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> Diversions:
        """
        Get ongoing diversions.

        Args:
            service_reference: Restrict to one service (default: all services)
            day: Up to three days ahead (default: today)
            operator: Operator filter
        """
        now = self._clock()
        return self._call(self._diversions_params(service_reference, day, operator, _utc_date(now)), now)

    def get_diversion_points(
        self,
        diversion_id: str,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> DiversionPoints:
        """Get the route of a diversion, for plotting on a map."""
        return self._call(self._diversion_points_params(diversion_id, operator), self._clock())

    # Bus times web service --------------------------------------------------

    def get_bus_times(
        self,
        timetables: Iterable[Timetable],
        departure_count: int = DEFAULT_DEPARTURES,
        day: Optional[date] = None,
        departure_time: Optional[time] = None,
    ) -> BusTimes:
        """
        Get upcoming departures for up to five timetables.

        Args:
            timetables: One to five stop/service/destination combinations
            departure_count: Departures per timetable, 1 to 10
            day: Up to three days ahead (default: today)
            departure_time: Time of day to start from (default: now)

        Returns:
            BusTimes with one entry per timetable answered by the service
        """
        now = self._clock()
        params = self._bus_times_params(timetables, departure_count, day, departure_time, _utc_date(now))
        return self._call(params, now)

    def get_journey_times(
        self,
        journey: JourneyIdentifier,
        stop_id: Optional[str] = None,
        operator: OperatorLike = Operator.ALL_OPERATORS,
        day: Optional[date] = None,
        mode: Union[JourneyTimeMode, str] = JourneyTimeMode.ALL,
    ) -> JourneyTimes:
        """
        Get the predicted stop times of one journey.

        A ``JourneyId`` must be combined with a ``stop_id``; a ``BusId``
        (fleet number) may omit it.
        """
        now = self._clock()
        params = self._journey_times_params(journey, stop_id, operator, day, mode, _utc_date(now))
        return self._call(params, now)


class AsyncMyBusTracker(_BaseClient):
    """Awaitable client for the My Bus Tracker web service.

    Same operations and errors as :class:`MyBusTracker`. Cancelling a call
    only aborts the in-flight request.
    """

    def __init__(
        self,
        api_key: Union[ApiKey, str, None] = None,
        endpoint: Optional[str] = None,
        transport: Optional[AsyncTransport] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(api_key=api_key, endpoint=endpoint, clock=clock)
        self._transport = transport or AsyncHttpxTransport()

    async def __aenter__(self) -> "AsyncMyBusTracker":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying transport."""
        await self._transport.aclose()

    async def _call(self, params: RequestParams, now: datetime) -> Record:
        request = self._encode(params, now)
        try:
            response = await self._transport.send(request)
        except TransportFailure:
            raise
        except _TRANSPORT_ERRORS as exc:
            raise self._transport_failure(request, exc) from exc
        return self._decode(request, response, params)

    async def get_topo_id(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> TopoId:
        return await self._call(GetTopoId(_coerce(Operator, operator, "operator")), self._clock())

    async def get_services(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> Services:
        return await self._call(GetServices(_coerce(Operator, operator, "operator")), self._clock())

    async def get_service_points(
        self,
        service_reference: str,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> ServicePoints:
        return await self._call(self._service_points_params(service_reference, operator), self._clock())

    async def get_destinations(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> Destinations:
        return await self._call(GetDestinations(_coerce(Operator, operator, "operator")), self._clock())

    async def get_bus_stops(self, operator: OperatorLike = Operator.ALL_OPERATORS) -> BusStops:
        return await self._call(GetBusStops(_coerce(Operator, operator, "operator")), self._clock())

    async def get_disruptions(
        self,
        disruption_type: Union[DisruptionType, int, None] = None,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> Disruptions:
        return await self._call(self._disruptions_params(disruption_type, operator), self._clock())

    async def get_diversions(
        self,
        service_reference: Optional[str] = None,
        day: Optional[date] = None,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> Diversions:
        now = self._clock()
        return await self._call(self._diversions_params(service_reference, day, operator, _utc_date(now)), now)

    async def get_diversion_points(
        self,
        diversion_id: str,
        operator: OperatorLike = Operator.ALL_OPERATORS,
    ) -> DiversionPoints:
        return await self._call(self._diversion_points_params(diversion_id, operator), self._clock())

    async def get_bus_times(
        self,
        timetables: Iterable[Timetable],
        departure_count: int = DEFAULT_DEPARTURES,
        day: Optional[date] = None,
        departure_time: Optional[time] = None,
    ) -> BusTimes:
        now = self._clock()
        params = self._bus_times_params(timetables, departure_count, day, departure_time, _utc_date(now))
        return await self._call(params, now)

    async def get_journey_times(
        self,
        journey: JourneyIdentifier,
        stop_id: Optional[str] = None,
        operator: OperatorLike = Operator.ALL_OPERATORS,
        day: Optional[date] = None,
        mode: Union[JourneyTimeMode, str] = JourneyTimeMode.ALL,
    ) -> JourneyTimes:
        now = self._clock()
        params = self._journey_times_params(journey, stop_id, operator, day, mode, _utc_date(now))
        return await self._call(params, now)
