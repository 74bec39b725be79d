"""Errors raised by the My Bus Tracker client."""

from typing import Optional


class ApiError(Exception):
    """Base class for every failure raised by the client."""


class InvalidParameter(ApiError):
    """Raised when caller input fails local validation. Never reaches the network."""

    def __init__(self, parameter: str, message: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message or f"Invalid value for '{parameter}'")


class DateOutOfBounds(InvalidParameter):
    """Raised when a requested day is in the past or more than three days ahead."""

    def __init__(self, parameter: str = "day", message: Optional[str] = None):
        super().__init__(parameter, message or "Date out of bounds: must be between today and three days ahead")


class TooManyTimetables(InvalidParameter):
    """Raised when more than five timetables are requested at once."""

    def __init__(self, count: int):
        self.count = count
        super().__init__("timetables", f"Too many timetables requested: {count} (maximum 5)")


class TooManyDepartures(InvalidParameter):
    """Raised when more than ten departures per timetable are requested."""

    def __init__(self, count: int):
        self.count = count
        super().__init__("departure_count", f"Too many departures requested: {count} (maximum 10)")


class TransportFailure(ApiError):
    """Raised when the network exchange itself fails."""

    def __init__(self, cause: BaseException, message: Optional[str] = None):
        self.cause = cause
        super().__init__(message or f"Error communicating with My Bus Tracker: {cause}")


class AuthenticationFailure(ApiError):
    """Raised when the remote service rejects the API key."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Authentication rejected ({code}): {message}")


class RemoteError(ApiError):
    """Raised when the remote service reports an application-level error.

    ``code`` and ``message`` are kept exactly as the service sent them.
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"My Bus Tracker error ({code}): {message}")


class DecodeError(ApiError):
    """Raised when a response does not match the expected shape."""

    def __init__(self, expected: str, detail: str):
        self.expected = expected
        self.detail = detail
        super().__init__(f"Could not decode {expected}: {detail}")
