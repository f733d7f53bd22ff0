"""Paging direction variants and walk configuration.

A walk binds three callables: fetch one page at a cursor, derive the next
cursor from a page, and decide from a page's boundary flags whether another
page should be requested. ``PageDirection`` provides the bindings for the
two streamable directions so the engine itself stays direction-agnostic.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from ...models import ItemID, ItemsPage


def last_item_id(page: ItemsPage) -> ItemID:
    """Cursor for the page after ``page``: the id of its last item."""
    cursor = page.last_id
    if cursor is None:
        raise ValueError("Cannot derive a cursor from an empty page")
    return cursor


class PageDirection(str, Enum):
    """Direction of a page request relative to its cursor.

    ``query_key`` names the query parameter that carries the cursor.
    """

    NEWER = "newer"
    OLDER = "older"
    AROUND = "around"

    @property
    def query_key(self) -> str:
        return "id" if self is PageDirection.AROUND else self.value

    @property
    def streamable(self) -> bool:
        return self is not PageDirection.AROUND

    def should_continue(self, page: ItemsPage) -> bool:
        """Whether a walk in this direction should fetch the page after ``page``.

        Raises:
            ValueError: For ``AROUND``, which is one-shot only.
        """
        if self is PageDirection.NEWER:
            return not page.at_start
        if self is PageDirection.OLDER:
            return not page.at_end
        raise ValueError(f"{self.name} pages cannot be walked")

    def walk(self, fetch_page: Callable[[ItemID], Awaitable[ItemsPage]]) -> CursorWalk:
        """Bind ``fetch_page`` to this direction's cursor and continuation rules."""
        if not self.streamable:
            raise ValueError(f"{self.name} pages cannot be walked")
        return CursorWalk(
            fetch_page=fetch_page,
            next_cursor=last_item_id,
            should_continue=self.should_continue,
            name=self.value,
        )


@dataclass(frozen=True)
class CursorWalk:
    """Callables driving one cursor walk.

    Attributes:
        fetch_page: Fetches one page at the given cursor
        should_continue: False once the page's boundary flag says the end is reached
        next_cursor: Cursor for the following page, derived from a non-empty page
        name: Label used in log records
    """

    fetch_page: Callable[[ItemID], Awaitable[ItemsPage]]
    should_continue: Callable[[ItemsPage], bool]
    next_cursor: Callable[[ItemsPage], ItemID] = last_item_id
    name: str = "custom"


class StopReason(str, Enum):
    """Why a walk ended."""

    EMPTY_PAGE = "empty_page"
    STALLED = "stalled"
    BOUNDARY = "boundary"
    CLOSED = "closed"
    FAILED = "failed"


@dataclass
class WalkStats:
    """Counters for one walk invocation.

    Attributes:
        start_cursor: Cursor the walk started at
        current_cursor: Cursor the next page would be fetched at
        pages_fetched: Pages successfully fetched
        items_yielded: Items handed to the consumer
        stop_reason: Set once the walk ends
    """

    start_cursor: ItemID
    current_cursor: ItemID
    pages_fetched: int = 0
    items_yielded: int = 0
    stop_reason: StopReason | None = None
