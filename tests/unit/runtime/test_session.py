"""Unit tests for session cookie lookup and nonce derivation."""

from __future__ import annotations

import json
from urllib.parse import quote

import aiohttp
import pytest
from yarl import URL

from pr0gramm.core import MalformedSessionCookie, Unauthenticated
from pr0gramm.runtime.session import (
    SessionStore,
    derive_nonce,
    parse_session_cookie,
)

SITE = "https://pr0gramm.com"


def me_cookie(payload: object) -> str:
    return quote(json.dumps(payload))


def store_with(value: str | None) -> tuple[SessionStore, aiohttp.CookieJar]:
    jar = aiohttp.CookieJar()
    if value is not None:
        jar.update_cookies({"me": value}, URL(SITE))
    return SessionStore(lambda: jar, SITE), jar


class TestParseSessionCookie:
    """Test raw cookie decoding."""

    def test_decodes_url_encoded_json(self):
        """Test a valid cookie decodes to its JSON object."""
        raw = me_cookie({"n": "cha0s", "id": "abcdef0123456789extra"})
        assert parse_session_cookie(raw)["id"] == "abcdef0123456789extra"

    @pytest.mark.parametrize(
        "raw",
        ["not json", quote("[1, 2]"), me_cookie({"n": "x"}), me_cookie({"id": 42}), me_cookie({"id": ""})],
    )
    def test_rejects_malformed(self, raw):
        """Test undecodable or id-less cookies are malformed."""
        with pytest.raises(MalformedSessionCookie):
            parse_session_cookie(raw)

    def test_malformed_is_unauthenticated(self):
        """Test malformed cookies surface as Unauthenticated to callers."""
        assert issubclass(MalformedSessionCookie, Unauthenticated)


def test_derive_nonce_takes_first_16_chars():
    """Test the nonce is the 16-character prefix of the session id."""
    assert derive_nonce("abcdef0123456789extra") == "abcdef0123456789"
    assert derive_nonce("short") == "short"


class TestSessionStore:
    """Test SessionStore against a real cookie jar."""

    @pytest.mark.asyncio
    async def test_valid_session(self):
        """Test a valid cookie gives a session and a nonce."""
        store, _ = store_with(me_cookie({"id": "abcdef0123456789extra"}))

        assert store.get_session_cookie() == {"id": "abcdef0123456789extra"}
        assert store.is_authenticated
        assert store.require_nonce("/items/vote") == "abcdef0123456789"

    @pytest.mark.asyncio
    async def test_no_cookie(self):
        """Test an empty jar means no session and no nonce."""
        store, _ = store_with(None)

        assert store.get_session_cookie() is None
        with pytest.raises(Unauthenticated) as exc_info:
            store.require_nonce("/items/vote")
        assert exc_info.value.path == "/items/vote"
        assert not isinstance(exc_info.value, MalformedSessionCookie)

    @pytest.mark.asyncio
    async def test_malformed_cookie_reads_as_no_session(self):
        """Test a malformed cookie is no session for reads but hard-fails for nonces."""
        store, _ = store_with("garbage")

        assert store.get_session_cookie() is None
        assert not store.is_authenticated
        with pytest.raises(MalformedSessionCookie):
            store.require_nonce()

    @pytest.mark.asyncio
    async def test_cookie_scoped_to_site(self):
        """Test cookies for other hosts are ignored."""
        jar = aiohttp.CookieJar()
        jar.update_cookies({"me": me_cookie({"id": "x" * 20})}, URL("https://example.com"))
        store = SessionStore(lambda: jar, SITE)

        assert store.get_session_cookie() is None

    def test_cookies_disabled(self):
        """Test a store without a jar has no session."""
        store = SessionStore(lambda: None, SITE)

        assert store.get_session_cookie() is None
        with pytest.raises(Unauthenticated):
            store.require_nonce()
