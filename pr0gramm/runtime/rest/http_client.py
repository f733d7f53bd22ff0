"""Async HTTP client wrapper with cookie handling."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp
from aiohttp.abc import AbstractCookieJar

from ...core.exceptions import RateLimitError, TransportError

logger = logging.getLogger(__name__)

Params = list[tuple[str, str]]


class HTTPClient:
    """Async HTTP client wrapper.

    The cookie jar is created lazily inside the running event loop unless one
    is passed in. With ``use_cookies=False`` no cookies are stored or sent.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        *,
        cookie_jar: AbstractCookieJar | None = None,
        use_cookies: bool = True,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self.use_cookies = use_cookies
        self._cookie_jar = cookie_jar if use_cookies else None
        self._session: aiohttp.ClientSession | None = None

    @property
    def cookie_jar(self) -> AbstractCookieJar | None:
        """Cookie jar in use.

        None when cookies are disabled or the default jar has not been created
        yet; it is created with the first session.
        """
        if not self.use_cookies:
            return None
        return self._cookie_jar

    def set_cookie_jar(self, cookie_jar: AbstractCookieJar | None) -> None:
        """Replace the cookie jar. Passing None disables cookies."""
        if self._session is not None and not self._session.closed:
            raise RuntimeError("Cannot replace the cookie jar while a session is open; close() first")
        self.use_cookies = cookie_jar is not None
        self._cookie_jar = cookie_jar

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            if not self.use_cookies:
                jar: AbstractCookieJar = aiohttp.DummyCookieJar()
            else:
                if self._cookie_jar is None:
                    # needs the running event loop
                    self._cookie_jar = aiohttp.CookieJar()
                jar = self._cookie_jar
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self.headers,
                cookie_jar=jar,
            )
        return self._session

    def _url(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: Params | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        data: Params | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST a urlencoded form, returning the decoded JSON body."""
        return await self._request("POST", url, data=data, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Params | None = None,
        data: Params | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        full_url = self._url(url)
        logger.debug("http_request", extra={"method": method, "url": full_url})
        try:
            async with self.session.request(
                method, full_url, params=params, data=data, headers=headers
            ) as response:
                if response.status == 429:
                    retry_after = _parse_retry_after(response.headers.get("Retry-After"))
                    logger.warning(
                        "http_error",
                        extra={"method": method, "url": full_url, "status": 429},
                    )
                    raise RateLimitError(
                        f"{method} {url} was rate limited", retry_after=retry_after, path=url
                    )
                if response.status != 200:
                    logger.warning(
                        "http_error",
                        extra={"method": method, "url": full_url, "status": response.status},
                    )
                    raise TransportError(
                        f"{method} {url} failed with HTTP {response.status}",
                        status_code=response.status,
                        path=url,
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.warning(
                        "http_error",
                        extra={"method": method, "url": full_url, "error_type": "invalid_json"},
                    )
                    raise TransportError(
                        f"{method} {url} returned invalid JSON",
                        status_code=response.status,
                        path=url,
                    ) from e
        except aiohttp.ClientError as e:
            logger.warning(
                "http_error",
                extra={"method": method, "url": full_url, "error_type": type(e).__name__},
            )
            raise TransportError(f"{method} {url} failed: {e}", path=url) from e
        except TimeoutError as e:
            logger.warning(
                "http_error",
                extra={"method": method, "url": full_url, "error_type": "timeout"},
            )
            raise TransportError(f"{method} {url} timed out", path=url) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _parse_retry_after(value: str | None, default: int = 60) -> int:
    if not value:
        return default
    try:
        return max(0, int(float(value)))
    except ValueError:
        return default
