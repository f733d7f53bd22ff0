"""Shared base for endpoint services."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..runtime.rest import RESTTransport

JSON = dict[str, Any]


class BaseService:
    """Holds the transport shared by all services of one client."""

    def __init__(self, transport: RESTTransport) -> None:
        self._transport = transport


def ensure_unix_timestamp(value: datetime | int | float) -> int:
    """Convert a datetime or a number of seconds to integer unix seconds."""
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)
