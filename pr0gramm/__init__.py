"""pr0gramm-api - async client for the pr0gramm REST API."""

from .client import Pr0grammAPI
from .core import (
    ClientConfig,
    ItemFlags,
    MalformedSessionCookie,
    Pr0grammError,
    RateLimitError,
    TransportError,
    Unauthenticated,
    UserMark,
    Vote,
)
from .models import DeleteItemOptions, Item, ItemsFilter, ItemsPage, SiteSettings
from .runtime.paging import CursorWalk, CursorWalker, PageDirection, StopReason

__version__ = "0.1.0"

__all__ = [
    "Pr0grammAPI",
    "ClientConfig",
    "ItemFlags",
    "UserMark",
    "Vote",
    "MalformedSessionCookie",
    "Pr0grammError",
    "RateLimitError",
    "TransportError",
    "Unauthenticated",
    "DeleteItemOptions",
    "Item",
    "ItemsFilter",
    "ItemsPage",
    "SiteSettings",
    "CursorWalk",
    "CursorWalker",
    "PageDirection",
    "StopReason",
]
