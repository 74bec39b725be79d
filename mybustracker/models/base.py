"""Base record model and shared enumerations."""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base class for every record decoded from a My Bus Tracker response.

    Records are immutable. Wire field names are camelCase unless a field
    declares its own alias.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Operator(str, Enum):
    """Bus operator filter."""

    LOTHIAN_BUSES = "LB"
    ALL_OPERATORS = "0"

    @classmethod
    def _missing_(cls, value):
        # The service answers with "ALL" where requests use "0"
        if value == "ALL":
            return cls.ALL_OPERATORS
        return None


class Reliability(str, Enum):
    """How a departure time was obtained."""

    DELAYED = "B"
    DELOCATED = "D"
    REAL_TIME_NOT_LOW_FLOOR_EQUIPPED = "F"
    REAL_TIME_LOW_FLOOR_EQUIPPED = "H"
    IMMOBILIZED = "I"
    NEUTRALIZED = "N"
    RADIO_FAULT = "R"
    ESTIMATED = "T"
    DIVERTED = "V"


class StopType(str, Enum):
    """Role of a stop on the journey."""

    TERMINUS = "D"
    NORMAL = "N"
    PART_ROUTE = "P"
    REFERENCE = "R"


class Direction(str, Enum):
    INBOUND = "A"
    OUTBOUND = "R"


class DisruptionType(IntEnum):
    ALL = 0
    NETWORK = 1
    SERVICE = 2
    BUS_STOP = 3


class DisruptionLevel(IntEnum):
    INFORMATIVE = 1
    MINOR = 2
    MAJOR = 3


class JourneyTimeMode(str, Enum):
    """Which stops of a journey to return."""

    ALL = "0"
    NEXT_REFERENCE = "1"
