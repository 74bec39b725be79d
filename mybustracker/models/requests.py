"""Typed parameters for each remote operation.

Every operation of the web service has exactly one parameter class below;
``REQUEST_TYPES`` lists the complete set. Values are built and validated by
the client, then turned into wire requests by the codec.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional, Tuple, Union

from .base import DisruptionType, JourneyTimeMode, Operator


@dataclass(frozen=True)
class Timetable:
    """
    A stop/service/destination combination to request departures for.

    ``operator`` is validated but not sent: the service answers for every
    operator serving the stop.
    """

    stop_id: str
    service_reference: str
    destination_reference: str
    operator: Operator = Operator.ALL_OPERATORS


@dataclass(frozen=True)
class JourneyId:
    value: str


@dataclass(frozen=True)
class BusId:
    """Fleet number of a bus."""

    value: str


JourneyIdentifier = Union[JourneyId, BusId]


# Topological web service ----------------------------------------------------


@dataclass(frozen=True)
class GetTopoId:
    operator: Operator = Operator.ALL_OPERATORS


@dataclass(frozen=True)
class GetServices:
    operator: Operator = Operator.ALL_OPERATORS


@dataclass(frozen=True)
class GetServicePoints:
    service_reference: str
    operator: Operator = Operator.ALL_OPERATORS


@dataclass(frozen=True)
class GetDestinations:
    operator: Operator = Operator.ALL_OPERATORS


@dataclass(frozen=True)
class GetBusStops:
    operator: Operator = Operator.ALL_OPERATORS


# Disruptions web service ----------------------------------------------------


@dataclass(frozen=True)
class GetDisruptions:
    operator: Operator = Operator.ALL_OPERATORS
    disruption_type: DisruptionType = DisruptionType.ALL


@dataclass(frozen=True)
class GetDiversions:
    operator: Operator = Operator.ALL_OPERATORS
    service_reference: Optional[str] = None
    day_offset: int = 0


@dataclass(frozen=True)
class GetDiversionPoints:
    diversion_id: str
    operator: Operator = Operator.ALL_OPERATORS


# Bus times web service ------------------------------------------------------


@dataclass(frozen=True)
class GetBusTimes:
    timetables: Tuple[Timetable, ...]
    departure_count: int = 2
    day_offset: int = 0
    departure_time: Optional[time] = None


@dataclass(frozen=True)
class GetJourneyTimes:
    journey: JourneyIdentifier
    operator: Operator = Operator.ALL_OPERATORS
    stop_id: Optional[str] = None
    day_offset: int = 0
    mode: JourneyTimeMode = JourneyTimeMode.ALL


RequestParams = Union[
    GetTopoId,
    GetServices,
    GetServicePoints,
    GetDestinations,
    GetBusStops,
    GetDisruptions,
    GetDiversions,
    GetDiversionPoints,
    GetBusTimes,
    GetJourneyTimes,
]

REQUEST_TYPES = (
    GetTopoId,
    GetServices,
    GetServicePoints,
    GetDestinations,
    GetBusStops,
    GetDisruptions,
    GetDiversions,
    GetDiversionPoints,
    GetBusTimes,
    GetJourneyTimes,
)
