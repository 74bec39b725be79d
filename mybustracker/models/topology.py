"""Records returned by the topological web service."""

from typing import Tuple

from pydantic import Field

from .base import Direction, Operator, Record


class TopoId(Record):
    """Identifier of the topology version in use. Changes at most once a day."""

    topo_id: str
    operator_id: Operator


class Service(Record):
    reference: str = Field(alias="ref")
    operator_id: Operator
    mnemonic: str = Field(alias="mnemo")
    name: str
    destinations: Tuple[str, ...] = Field(alias="dests")


class Services(Record):
    services: Tuple[Service, ...]


class ServicePoint(Record):
    """One point of a service route, in plotting order."""

    chainage: int
    order: int
    latitude: float = Field(alias="x")
    longitude: float = Field(alias="y")


class ServicePoints(Record):
    service_reference: str = Field(alias="ref")
    operator_id: Operator
    service_points: Tuple[ServicePoint, ...]


class Destination(Record):
    reference: str = Field(alias="ref")
    operator_id: Operator
    name: str
    direction: Direction
    service: str


class Destinations(Record):
    destinations: Tuple[Destination, ...] = Field(alias="dests")


class BusStop(Record):
    operator_id: Operator
    stop_id: str
    name: str
    latitude: float = Field(alias="x")
    longitude: float = Field(alias="y")
    orientation: int = Field(alias="cap")
    services: Tuple[str, ...]
    destinations: Tuple[str, ...] = Field(alias="dests")


class BusStops(Record):
    bus_stops: Tuple[BusStop, ...]
