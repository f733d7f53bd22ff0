"""Runtime layer: HTTP transport, session handling and cursor paging."""

from .paging import CursorWalk, CursorWalker, PageDirection, StopReason, WalkStats
from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport
from .session import SessionStore, derive_nonce, parse_session_cookie

__all__ = [
    "CursorWalk",
    "CursorWalker",
    "PageDirection",
    "StopReason",
    "WalkStats",
    "HTTPClient",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
    "RESTTransport",
    "SessionStore",
    "derive_nonce",
    "parse_session_cookie",
]
