"""Records returned by the disruptions web service."""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from .base import DisruptionLevel, DisruptionType, Operator, Record


class Disruption(Record):
    id: str
    operator_id: Operator
    level: DisruptionLevel
    disruption_type: DisruptionType = Field(alias="type")
    targets: Tuple[str, ...]
    valid_until: Optional[datetime] = None
    message: str


class Disruptions(Record):
    disruptions: Tuple[Disruption, ...]


class CancelledBusStop(Record):
    stop_id: str
    stop_name: str
    replaced_stop_id: str
    replaced_stop_name: str


class TemporaryBusStop(Record):
    stop_id: str
    stop_name: str
    stop_number: int = Field(alias="num")
    stop_type: str = Field(alias="type")


class Diversion(Record):
    """A planned change of route for one service."""

    diversion_reference: str = Field(alias="ref")
    diversion_id: str
    operator_id: Operator
    service_reference: str = Field(alias="refService")
    start_stop_id: str
    start_stop_name: str
    start_date: datetime
    end_stop_id: str
    end_stop_name: str
    end_date: datetime
    days: str
    length: int
    time_shift: int
    cancelled_bus_stops: Tuple[CancelledBusStop, ...]
    temporary_bus_stops: Tuple[TemporaryBusStop, ...]


class Diversions(Record):
    diversions: Tuple[Diversion, ...]


class DiversionPoint(Record):
    order: int
    latitude: float = Field(alias="x")
    longitude: float = Field(alias="y")


class DiversionPoints(Record):
    diversion_points: Tuple[DiversionPoint, ...]
