"""Client configuration.

A ``ClientConfig`` is built once when a client is created and never mutated.
It replaces process-wide header state: everything that ends up on the wire
by default (scheme, host, user agent, timeout) is derived from it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_HOST = "pr0gramm.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "pr0gramm-api/0.1 (+https://github.com/pr0gramm-api)"

_TRUTHY = {"1", "true", "yes", "on"}


def get_base_address(insecure: bool = False, host: str = DEFAULT_HOST) -> str:
    """Get the site address used for cookie lookups.

    Examples:
        >>> get_base_address()
        'https://pr0gramm.com'
        >>> get_base_address(insecure=True)
        'http://pr0gramm.com'
    """
    scheme = "http" if insecure else "https"
    return f"{scheme}://{host}"


def get_api_base_address(insecure: bool = False, host: str = DEFAULT_HOST) -> str:
    """Get the REST API base address.

    Examples:
        >>> get_api_base_address()
        'https://pr0gramm.com/api'
    """
    return f"{get_base_address(insecure, host)}/api"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings.

    Attributes:
        insecure: Use plain http instead of https
        host: Remote host name
        timeout: Total request timeout in seconds
        user_agent: Value of the ``User-Agent`` header sent with every request
        extra_headers: Additional default headers
    """

    insecure: bool = False
    host: str = DEFAULT_HOST
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    extra_headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("ClientConfig.host must not be empty")
        if self.timeout <= 0:
            raise ValueError("ClientConfig.timeout must be positive")

    @property
    def base_address(self) -> str:
        return get_base_address(self.insecure, self.host)

    @property
    def api_base_address(self) -> str:
        return get_api_base_address(self.insecure, self.host)

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for every request."""
        headers = {"User-Agent": self.user_agent}
        headers.update(dict(self.extra_headers))
        return headers

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ClientConfig:
        """Build a config from ``PR0GRAMM_*`` environment variables.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            insecure=env.get("PR0GRAMM_INSECURE", "").strip().lower() in _TRUTHY,
            host=env.get("PR0GRAMM_HOST", DEFAULT_HOST),
            timeout=float(env.get("PR0GRAMM_TIMEOUT", DEFAULT_TIMEOUT)),
            user_agent=env.get("PR0GRAMM_USER_AGENT", DEFAULT_USER_AGENT),
        )
