"""Custom exception hierarchy."""

from __future__ import annotations


class Pr0grammError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(Pr0grammError):
    """Network failure or non-success status from the remote API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.path = path


class RateLimitError(TransportError):
    """Remote API rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60, path: str | None = None) -> None:
        super().__init__(message, status_code=429, path=path)
        self.retry_after = retry_after


class Unauthenticated(Pr0grammError):
    """A state-changing request needs a session nonce but no session is available.

    Raised before any network call is made.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MalformedSessionCookie(Unauthenticated):
    """The ``me`` session cookie is present but cannot be decoded.

    Reads treat such a cookie as "no session"; only nonce derivation raises it.
    """

    pass
