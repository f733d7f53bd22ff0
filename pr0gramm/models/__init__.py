"""Data models for pr0gramm API payloads.

All models are Pydantic v2 and frozen. Only item pages are modelled; the
remaining endpoints return decoded JSON.
"""

from .filters import ItemsFilter, create_tag_list
from .item import Item, ItemID, ItemsPage
from .requests import DeleteItemOptions, SiteSettings

__all__ = [
    "DeleteItemOptions",
    "Item",
    "ItemID",
    "ItemsFilter",
    "ItemsPage",
    "SiteSettings",
    "create_tag_list",
]
