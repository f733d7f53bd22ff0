"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from pr0gramm.core import (
    MalformedSessionCookie,
    Pr0grammError,
    RateLimitError,
    TransportError,
    Unauthenticated,
)


def test_rate_limit_error_with_retry_after():
    """Test RateLimitError with retry_after (meaningful behavior)."""
    error = RateLimitError("rate limit", retry_after=120, path="/items/get")
    assert error.status_code == 429
    assert error.retry_after == 120
    assert error.path == "/items/get"
    assert isinstance(error, TransportError)
    assert isinstance(error, Pr0grammError)


def test_transport_error_with_status_code():
    """Test TransportError with status_code (meaningful behavior)."""
    error = TransportError("error", status_code=400)
    assert str(error) == "error"
    assert error.status_code == 400
    assert error.path is None


def test_malformed_cookie_is_unauthenticated():
    """Test callers catching Unauthenticated also see malformed cookies."""
    error = MalformedSessionCookie("bad cookie")
    assert isinstance(error, Unauthenticated)
    assert isinstance(error, Pr0grammError)
    assert not isinstance(error, TransportError)


def test_unauthenticated_carries_path():
    """Test Unauthenticated records the refused path."""
    error = Unauthenticated("not logged in", path="/items/vote")
    assert error.path == "/items/vote"
