"""Items endpoints, page fetching and item streams.

``/items/get`` is the only paged endpoint. A page request carries the
filter's query plus exactly one cursor parameter chosen by the direction:
``newer``, ``older`` or ``id`` (around).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from ..core.enums import Vote
from ..models import DeleteItemOptions, Item, ItemID, ItemsFilter, ItemsPage
from ..runtime.paging import CursorWalk, CursorWalker, PageDirection
from ..runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport
from .base import JSON, BaseService


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for one page request."""
    options: ItemsFilter = params["options"]
    query = options.to_query()
    direction: PageDirection | None = params.get("direction")
    if direction is not None:
        query = {direction.query_key: params["cursor"], **query}
    return query


# Endpoint specification
GET_ITEMS_SPEC = RestEndpointSpec(
    id="items_get",
    method="GET",
    build_path=lambda params: "/items/get",
    build_query=build_query,
)


class ItemsPageAdapter(ResponseAdapter):
    """Adapter for parsing an ``/items/get`` response into an ItemsPage."""

    def parse(self, response: Any, params: dict[str, Any]) -> ItemsPage:
        return ItemsPage.model_validate(response or {})


class ItemsPageFetcher:
    """Fetches pages of one direction with one fixed filter.

    The same cursor always yields the same request; nothing is shared or
    mutated between calls.
    """

    def __init__(
        self,
        runner: RestRunner,
        direction: PageDirection,
        options: ItemsFilter,
    ) -> None:
        self._runner = runner
        self._adapter = ItemsPageAdapter()
        self.direction = direction
        self.options = options

    async def fetch_page(self, cursor: ItemID) -> ItemsPage:
        return await self._runner.run(
            spec=GET_ITEMS_SPEC,
            adapter=self._adapter,
            params={"options": self.options, "direction": self.direction, "cursor": cursor},
        )

    def as_walk(self) -> CursorWalk:
        """Walk binding for this fetcher's direction."""
        return self.direction.walk(self.fetch_page)


class ItemsService(BaseService):
    """``/items/*`` endpoints."""

    def __init__(self, transport: RESTTransport) -> None:
        super().__init__(transport)
        self._runner = RestRunner(transport)

    def page_fetcher(self, direction: PageDirection, options: ItemsFilter) -> ItemsPageFetcher:
        return ItemsPageFetcher(self._runner, direction, options)

    async def get_items(self, options: ItemsFilter) -> ItemsPage:
        """Newest page matching ``options``."""
        return await self._runner.run(
            spec=GET_ITEMS_SPEC, adapter=ItemsPageAdapter(), params={"options": options}
        )

    async def get_items_newer(self, options: ItemsFilter, newer: ItemID) -> ItemsPage:
        return await self.page_fetcher(PageDirection.NEWER, options).fetch_page(newer)

    async def get_items_older(self, options: ItemsFilter, older: ItemID) -> ItemsPage:
        return await self.page_fetcher(PageDirection.OLDER, options).fetch_page(older)

    async def get_items_around(self, options: ItemsFilter, around: ItemID) -> ItemsPage:
        return await self.page_fetcher(PageDirection.AROUND, options).fetch_page(around)

    def walk_stream_newer(self, options: ItemsFilter, newer: ItemID) -> AsyncIterator[Item]:
        """Stream items newer than ``newer``, page after page, until the newest one."""
        return self.walk_stream(newer, self.page_fetcher(PageDirection.NEWER, options).as_walk())

    def walk_stream_older(self, options: ItemsFilter, older: ItemID) -> AsyncIterator[Item]:
        """Stream items older than ``older``, page after page, until the oldest one."""
        return self.walk_stream(older, self.page_fetcher(PageDirection.OLDER, options).as_walk())

    def walk_stream(self, start: ItemID, walk: CursorWalk) -> AsyncIterator[Item]:
        """Stream items with custom walk callables."""
        return CursorWalker(walk).walk(start)

    async def get_info(self, item_id: ItemID) -> JSON:
        return await self._transport.get("/items/info", {"itemId": item_id})

    async def delete(self, options: DeleteItemOptions) -> JSON:
        return await self._transport.post("/items/delete", options.to_form())

    async def vote(self, item_id: ItemID, absolute_vote: Vote) -> JSON:
        return await self._transport.post("/items/vote", {"id": item_id, "vote": int(absolute_vote)})

    async def rate_limited(self) -> JSON:
        return await self._transport.post("/items/ratelimited")
