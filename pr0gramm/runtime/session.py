"""Session cookie lookup and nonce derivation.

The site keeps the login session in a cookie named ``me`` whose value is a
URL-encoded JSON object, e.g. ``{"n": "name", "id": "abcdef0123456789...", ...}``.
Every state-changing request must carry ``_nonce``, the first 16 characters
of that session id.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from urllib.parse import unquote

from aiohttp.abc import AbstractCookieJar
from yarl import URL

from ..core.exceptions import MalformedSessionCookie, Unauthenticated

SESSION_COOKIE_NAME = "me"
NONCE_LENGTH = 16


def parse_session_cookie(raw: str) -> dict[str, Any]:
    """Decode a raw ``me`` cookie value.

    Raises:
        MalformedSessionCookie: If the value is not an URL-encoded JSON object
            with a non-empty string ``id``.
    """
    try:
        decoded = json.loads(unquote(raw))
    except ValueError as e:
        raise MalformedSessionCookie("Session cookie is not valid JSON") from e
    if not isinstance(decoded, dict):
        raise MalformedSessionCookie("Session cookie is not a JSON object")
    session_id = decoded.get("id")
    if not isinstance(session_id, str) or not session_id:
        raise MalformedSessionCookie("Session cookie has no session id")
    return decoded


def derive_nonce(session_id: str) -> str:
    """Nonce for state-changing requests: the first 16 characters of the session id."""
    return session_id[:NONCE_LENGTH]


class SessionStore:
    """Read-only view of the session cookie held by a cookie jar.

    Args:
        cookie_jar: Callable returning the current jar, or None when cookies
            are disabled. A callable is used because the HTTP client creates
            its jar lazily and may swap it.
        base_address: Site address cookies are scoped to
    """

    def __init__(
        self,
        cookie_jar: Callable[[], AbstractCookieJar | None],
        base_address: str,
    ) -> None:
        self._cookie_jar = cookie_jar
        self._url = URL(base_address)

    def _raw_cookie(self) -> str | None:
        jar = self._cookie_jar()
        if jar is None:
            return None
        morsel = jar.filter_cookies(self._url).get(SESSION_COOKIE_NAME)
        if morsel is None or not morsel.value:
            return None
        return morsel.value

    def get_session_cookie(self) -> dict[str, Any] | None:
        """Current session cookie, or None when absent or malformed."""
        raw = self._raw_cookie()
        if raw is None:
            return None
        try:
            return parse_session_cookie(raw)
        except MalformedSessionCookie:
            return None

    @property
    def is_authenticated(self) -> bool:
        return self.get_session_cookie() is not None

    def require_nonce(self, path: str | None = None) -> str:
        """Nonce for the current session.

        Raises:
            Unauthenticated: No session cookie is present.
            MalformedSessionCookie: A session cookie is present but undecodable.
        """
        raw = self._raw_cookie()
        if raw is None:
            where = f" to {path}" if path else ""
            raise Unauthenticated(
                f"Not logged in. The post request{where} requires authentication.", path=path
            )
        cookie = parse_session_cookie(raw)
        return derive_nonce(cookie["id"])
