"""Records returned by the bus times web service."""

import datetime
from typing import Optional, Tuple

from pydantic import Field

from .base import Operator, Record, Reliability, StopType


class TimeData(Record):
    """A single predicted departure."""

    day: int
    time: str
    minutes: int
    reliability: Reliability
    stop_type: StopType = Field(alias="type")
    terminus: str
    journey_id: str
    bus_id: Optional[str] = None


class BusTime(Record):
    """Upcoming departures of one service towards one destination at one stop."""

    operator_id: Operator
    stop_id: str
    stop_name: str
    service_reference: str = Field(alias="refService")
    service_mnemonic: str = Field(alias="mnemoService")
    service_name: str = Field(alias="nameService")
    destination_reference: Optional[str] = Field(default=None, alias="refDest")
    destination_name: Optional[str] = Field(default=None, alias="nameDest")
    times: Tuple[TimeData, ...] = Field(alias="timeDatas")
    global_disruption: bool
    service_disruption: bool
    bus_stop_disruption: bool
    service_diversion: bool


class BusTimes(Record):
    bus_times: Tuple[BusTime, ...]


class JourneyTimeData(Record):
    """Predicted passage of a journey at one stop."""

    order: int
    stop_id: str
    stop_name: str
    day: int
    time: datetime.time
    minutes: int
    reliability: Reliability
    stop_type: str = Field(alias="type")
    disruption: bool = Field(alias="busStopDisruption")


class JourneyTime(Record):
    journey_id: str
    bus_id: Optional[str] = None
    operator_id: Operator
    service_reference: str = Field(alias="refService")
    service_mnemonic: str = Field(alias="mnemoService")
    service_name: str = Field(alias="nameService")
    destination_reference: str = Field(alias="refDest")
    destination_name: str = Field(alias="nameDest")
    journey_times: Tuple[JourneyTimeData, ...] = Field(alias="journeyTimeDatas")
    global_disruption: bool
    service_disruption: bool
    service_diversion: bool


class JourneyTimes(Record):
    journey_times: Tuple[JourneyTime, ...]
