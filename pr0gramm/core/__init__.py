"""Core types: configuration, enumerations and the exception hierarchy."""

from .config import (
    DEFAULT_HOST,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ClientConfig,
    get_api_base_address,
    get_base_address,
)
from .enums import ItemFlags, UserMark, Vote
from .exceptions import (
    MalformedSessionCookie,
    Pr0grammError,
    RateLimitError,
    TransportError,
    Unauthenticated,
)

__all__ = [
    "ClientConfig",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "get_api_base_address",
    "get_base_address",
    "ItemFlags",
    "UserMark",
    "Vote",
    "MalformedSessionCookie",
    "Pr0grammError",
    "RateLimitError",
    "TransportError",
    "Unauthenticated",
]
