"""Structured logging for cursor walks."""

from __future__ import annotations

import logging

from .definitions import WalkStats

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    walk: str,
    page_index: int,
    cursor: int,
    items: int,
    at_start: bool,
    at_end: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a fetched page.

    Args:
        walk: Walk label (direction name)
        page_index: Zero-based index of the page within the walk
        cursor: Cursor the page was requested at
        items: Number of items in the page
        at_start: Server's newest-boundary flag
        at_end: Server's oldest-boundary flag
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "walk": walk,
            "page_index": page_index,
            "cursor": cursor,
            "items": items,
            "at_start": at_start,
            "at_end": at_end,
            "latency_ms": latency_ms,
        },
    )


def log_walk_stopped(*, walk: str, stats: WalkStats) -> None:
    """Log the end of a walk."""
    logger.info(
        "walk_stopped",
        extra={
            "walk": walk,
            "start_cursor": stats.start_cursor,
            "current_cursor": stats.current_cursor,
            "pages_fetched": stats.pages_fetched,
            "items_yielded": stats.items_yielded,
            "stop_reason": stats.stop_reason.value if stats.stop_reason else None,
        },
    )


def log_page_error(
    *,
    walk: str,
    page_index: int,
    cursor: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch."""
    logger.error(
        "page_error",
        extra={
            "walk": walk,
            "page_index": page_index,
            "cursor": cursor,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
