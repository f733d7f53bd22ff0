"""REST transport: parameter serialization and nonce stamping over HTTPClient."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from aiohttp.abc import AbstractCookieJar

from ..session import SessionStore
from .http_client import HTTPClient, Params

NONCE_FIELD = "_nonce"


def serialize_params(data: Mapping[str, Any] | None) -> Params:
    """Flatten a parameter mapping into ``(key, value)`` string pairs.

    ``None`` values are omitted and booleans become ``"true"``/``"false"``.
    Lists and tuples use indexed keys, so ``{"tags": [1, 2]}`` becomes
    ``tags[0]=1&tags[1]=2`` as the site's form parser expects.
    """
    out: Params = []
    for key, value in (data or {}).items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            elements = [v for v in value if v is not None]
            out.extend((f"{key}[{i}]", _to_str(v)) for i, v in enumerate(elements))
        else:
            out.append((key, _to_str(value)))
    return out


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    return str(value)


class RESTTransport:
    """Issues single GET/POST requests against the API base address.

    POST requests get ``_nonce`` added to their form body unless
    ``ignore_nonce`` is set. Without a usable session that raises
    ``Unauthenticated`` before anything is sent.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session_base_address: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        cookie_jar: AbstractCookieJar | None = None,
        use_cookies: bool = True,
        http: HTTPClient | None = None,
    ) -> None:
        self._http = http or HTTPClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            cookie_jar=cookie_jar,
            use_cookies=use_cookies,
        )
        # Cookies are scoped to the site, not the /api prefix
        self._session = SessionStore(
            lambda: self._http.cookie_jar,
            session_base_address or base_url,
        )

    @property
    def http(self) -> HTTPClient:
        return self._http

    @property
    def session(self) -> SessionStore:
        return self._session

    @property
    def cookies(self) -> AbstractCookieJar | None:
        return self._http.cookie_jar

    @cookies.setter
    def cookies(self, value: AbstractCookieJar | None) -> None:
        self._http.set_cookie_jar(value)

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._http.get(path, params=serialize_params(params))

    async def post(
        self,
        path: str,
        data: Mapping[str, Any] | None = None,
        *,
        ignore_nonce: bool = False,
    ) -> Any:
        form = dict(data or {})
        if not ignore_nonce:
            form[NONCE_FIELD] = self._session.require_nonce(path)
        return await self._http.post(path, data=serialize_params(form))

    async def close(self) -> None:
        await self._http.close()
