"""Client library for the My Bus Tracker real-time bus information service.

Not endorsed by or affiliated with City of Edinburgh Council, Lothian Buses
or Ineo Systrans. API keys and the web service guide are available at
http://www.mybustracker.co.uk/?page=API%20Key
"""

from .config import APP_VERSION as __version__
from .models import (
    BusId,
    DisruptionType,
    JourneyId,
    JourneyTimeMode,
    Operator,
    Timetable,
)
from .services import (
    ApiError,
    ApiKey,
    AsyncMyBusTracker,
    AuthenticationFailure,
    DecodeError,
    InvalidParameter,
    MyBusTracker,
    RemoteError,
    TransportFailure,
)

__all__ = [
    "__version__",
    "MyBusTracker",
    "AsyncMyBusTracker",
    "ApiKey",
    "Operator",
    "DisruptionType",
    "JourneyTimeMode",
    "Timetable",
    "JourneyId",
    "BusId",
    "ApiError",
    "InvalidParameter",
    "TransportFailure",
    "AuthenticationFailure",
    "RemoteError",
    "DecodeError",
]
