"""Top-level API client.

Architecture:
    ``Pr0grammAPI`` owns one ``RESTTransport`` and hands it to one service
    per API area. The transport owns the aiohttp session and cookie jar, so
    closing the client closes everything.
"""

from __future__ import annotations

from typing import Literal

from aiohttp.abc import AbstractCookieJar

from .core.config import ClientConfig
from .runtime.rest import RESTTransport
from .services import (
    CommentsService,
    ContactService,
    ItemsService,
    MessagesService,
    ProfileService,
    TagsService,
    UserService,
)


class Pr0grammAPI:
    """A set of services to interact with pr0gramm, modelled on the API the site uses.

    Use ``create_with_cookies`` for the common case or
    ``create_with_requester`` to supply a preconfigured transport.
    """

    def __init__(self, transport: RESTTransport, config: ClientConfig | None = None) -> None:
        self._transport = transport
        self.config = config or ClientConfig()
        self.items = ItemsService(transport)
        self.tags = TagsService(transport)
        self.comments = CommentsService(transport)
        self.profile = ProfileService(transport)
        self.contact = ContactService(transport)
        self.messages = MessagesService(transport)
        self.user = UserService(transport)

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    @property
    def cookies(self) -> AbstractCookieJar | None:
        """Cookie jar in use; None when cookies are disabled or before the first request."""
        return self._transport.cookies

    @cookies.setter
    def cookies(self, value: AbstractCookieJar | None) -> None:
        self._transport.cookies = value

    @property
    def is_authenticated(self) -> bool:
        return self._transport.session.is_authenticated

    @classmethod
    def create_with_requester(
        cls, requester: RESTTransport, config: ClientConfig | None = None
    ) -> Pr0grammAPI:
        return cls(requester, config)

    @classmethod
    def create_with_cookies(
        cls,
        cookies: AbstractCookieJar | Literal[False] | None = None,
        insecure: bool = False,
        config: ClientConfig | None = None,
    ) -> Pr0grammAPI:
        """Create a client with its own transport.

        Args:
            cookies: ``False`` disables cookies, a jar is used as is, ``None``
                creates a new jar on first use
            insecure: Use http instead of https (ignored when ``config`` is given)
            config: Full client configuration
        """
        config = config or ClientConfig(insecure=insecure)
        transport = RESTTransport(
            config.api_base_address,
            session_base_address=config.base_address,
            timeout=config.timeout,
            headers=config.headers,
            cookie_jar=cookies if cookies is not False else None,
            use_cookies=cookies is not False,
        )
        return cls(transport, config)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> Pr0grammAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
