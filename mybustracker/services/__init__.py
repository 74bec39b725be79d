"""Services for talking to the My Bus Tracker web service."""

from .api_key import ApiKey
from .client import AsyncMyBusTracker, MyBusTracker
from .codec import WireRequest, WireResponse, decode, encode
from .errors import (
    ApiError,
    AuthenticationFailure,
    DateOutOfBounds,
    DecodeError,
    InvalidParameter,
    RemoteError,
    TooManyDepartures,
    TooManyTimetables,
    TransportFailure,
)
from .transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport

__all__ = [
    "ApiKey",
    "MyBusTracker",
    "AsyncMyBusTracker",
    "WireRequest",
    "WireResponse",
    "encode",
    "decode",
    "Transport",
    "AsyncTransport",
    "HttpxTransport",
    "AsyncHttpxTransport",
    "ApiError",
    "InvalidParameter",
    "DateOutOfBounds",
    "TooManyTimetables",
    "TooManyDepartures",
    "TransportFailure",
    "AuthenticationFailure",
    "RemoteError",
    "DecodeError",
]
