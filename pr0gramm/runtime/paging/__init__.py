"""Cursor paging layer.

Turns a paged "items newer/older than cursor" API into a lazy stream of
items.

Architecture:
    - definitions.py: Direction variants, walk bindings, stats
    - executors.py: The walk engine (CursorWalker)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import CursorWalk, PageDirection, StopReason, WalkStats, last_item_id
from .executors import CursorWalker, walk_stream

__all__ = [
    "CursorWalk",
    "CursorWalker",
    "PageDirection",
    "StopReason",
    "WalkStats",
    "last_item_id",
    "walk_stream",
]
