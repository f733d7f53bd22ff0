"""Cursor walk execution.

``CursorWalker`` turns repeated page fetches into one lazy stream of items.
Pages are fetched strictly one after another, and only once the consumer has
taken every item of the previous page, so a long walk never holds more than
one page in memory.

A walk ends, without error, when:
    - a page comes back empty,
    - the cursor derived from a page equals the cursor it was fetched at
      (stall), or
    - the direction's continuation predicate rejects the page's boundary flags.

The stall check runs before the boundary check and neither replaces the
other: the server's boundary flags have been seen to lag by one page.

Fetch errors propagate to the consumer at the point where the failing page
would have been read. Items yielded before that stay valid; the walk cannot
be resumed, start a new one at the last seen id instead.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from time import perf_counter

from ...models import Item, ItemID
from .definitions import CursorWalk, StopReason, WalkStats
from .telemetry import log_page_error, log_page_fetched, log_walk_stopped


class CursorWalker:
    """Drives a ``CursorWalk`` from a starting cursor.

    Each call to ``walk`` is an independent session with its own cursor
    state; ``last_stats`` refers to the most recently started one.
    """

    def __init__(self, walk: CursorWalk) -> None:
        self._walk = walk
        self.last_stats: WalkStats | None = None

    @property
    def name(self) -> str:
        return self._walk.name

    async def walk(self, start: ItemID) -> AsyncIterator[Item]:
        """Yield items page by page, starting at cursor ``start``.

        Stop consuming (or ``aclose()`` the iterator) at any time; no further
        page is requested afterwards.
        """
        fns = self._walk
        stats = WalkStats(start_cursor=start, current_cursor=start)
        self.last_stats = stats

        current_id = start
        try:
            while True:
                fetch_start = perf_counter()
                try:
                    page = await fns.fetch_page(current_id)
                except Exception as e:
                    log_page_error(
                        walk=fns.name,
                        page_index=stats.pages_fetched,
                        cursor=current_id,
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                    raise
                stats.pages_fetched += 1
                log_page_fetched(
                    walk=fns.name,
                    page_index=stats.pages_fetched - 1,
                    cursor=current_id,
                    items=len(page.items),
                    at_start=page.at_start,
                    at_end=page.at_end,
                    latency_ms=(perf_counter() - fetch_start) * 1000.0,
                )

                if not page.items:
                    stats.stop_reason = StopReason.EMPTY_PAGE
                    return

                for item in page.items:
                    stats.items_yielded += 1
                    yield item

                last_id = current_id
                current_id = fns.next_cursor(page)
                stats.current_cursor = current_id

                if current_id == last_id:
                    stats.stop_reason = StopReason.STALLED
                    return

                if not fns.should_continue(page):
                    stats.stop_reason = StopReason.BOUNDARY
                    return
        except (GeneratorExit, asyncio.CancelledError):
            stats.stop_reason = StopReason.CLOSED
            raise
        finally:
            if stats.stop_reason is None:
                stats.stop_reason = StopReason.FAILED
            log_walk_stopped(walk=fns.name, stats=stats)


def walk_stream(start: ItemID, walk: CursorWalk) -> AsyncIterator[Item]:
    """Shorthand for ``CursorWalker(walk).walk(start)``."""
    return CursorWalker(walk).walk(start)
