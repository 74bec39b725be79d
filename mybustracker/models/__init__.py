"""Data models for the My Bus Tracker client."""

from .base import (
    Direction,
    DisruptionLevel,
    DisruptionType,
    JourneyTimeMode,
    Operator,
    Record,
    Reliability,
    StopType,
)
from .topology import (
    BusStop,
    BusStops,
    Destination,
    Destinations,
    Service,
    ServicePoint,
    ServicePoints,
    Services,
    TopoId,
)
from .bus_times import BusTime, BusTimes, JourneyTime, JourneyTimeData, JourneyTimes, TimeData
from .disruptions import (
    CancelledBusStop,
    Disruption,
    Disruptions,
    Diversion,
    DiversionPoint,
    DiversionPoints,
    Diversions,
    TemporaryBusStop,
)
from .requests import (
    REQUEST_TYPES,
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

__all__ = [
    "Record",
    "Operator",
    "Reliability",
    "StopType",
    "Direction",
    "DisruptionType",
    "DisruptionLevel",
    "JourneyTimeMode",
    "TopoId",
    "Service",
    "Services",
    "ServicePoint",
    "ServicePoints",
    "Destination",
    "Destinations",
    "BusStop",
    "BusStops",
    "TimeData",
    "BusTime",
    "BusTimes",
    "JourneyTimeData",
    "JourneyTime",
    "JourneyTimes",
    "Disruption",
    "Disruptions",
    "CancelledBusStop",
    "TemporaryBusStop",
    "Diversion",
    "Diversions",
    "DiversionPoint",
    "DiversionPoints",
    "Timetable",
    "JourneyId",
    "BusId",
    "JourneyIdentifier",
    "GetTopoId",
    "GetServices",
    "GetServicePoints",
    "GetDestinations",
    "GetBusStops",
    "GetDisruptions",
    "GetDiversions",
    "GetDiversionPoints",
    "GetBusTimes",
    "GetJourneyTimes",
    "RequestParams",
    "REQUEST_TYPES",
]
