"""Developer API key handling."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .errors import InvalidParameter


@dataclass(frozen=True)
class ApiKey:
    """Developer key for the My Bus Tracker web service.

    The service never receives the raw key. Each request carries an MD5 digest
    of the raw key followed by the current UTC hour (``YYYYMMDDHH``), so a
    derived key is only accepted during the clock hour it was made for and the
    system clock must be accurate.
    """

    raw: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str) or not self.raw.strip():
            raise InvalidParameter("api_key", "API key must be a non-empty string")

    def derive(self, now: datetime) -> str:
        """Return the key to send for requests made at ``now``."""
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        stamp = now.astimezone(timezone.utc).strftime("%Y%m%d%H")
        digest = hashlib.md5(f"{self.raw}{stamp}".encode("utf-8"), usedforsecurity=False)
        return digest.hexdigest()

    def __repr__(self) -> str:
        return "ApiKey(****)"

    __str__ = __repr__
