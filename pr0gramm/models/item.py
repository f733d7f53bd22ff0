"""Item and item page data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ItemID = int


class Item(BaseModel):
    """A single post as returned by ``/items/get``.

    Only ``id`` is required; the paging engine depends on nothing else.
    Unknown fields are kept so callers can read whatever the API sends.
    """

    id: ItemID
    promoted: int = 0
    up: int = 0
    down: int = 0
    created: int | None = None
    image: str | None = None
    thumb: str | None = None
    fullsize: str | None = None
    width: int | None = None
    height: int | None = None
    audio: bool | None = None
    source: str | None = None
    flags: int | None = None
    user: str | None = None
    mark: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class ItemsPage(BaseModel):
    """One page of items plus the server's boundary flags.

    Attributes:
        items: Items in the order the server returned them
        at_start: The page reaches the newest known item
        at_end: The page reaches the oldest known item
        error: Error code reported by the API, if any
    """

    items: tuple[Item, ...] = ()
    at_start: bool = Field(default=False, alias="atStart")
    at_end: bool = Field(default=False, alias="atEnd")
    error: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    @property
    def last_id(self) -> ItemID | None:
        """Identifier of the last item, or None for an empty page."""
        if not self.items:
            return None
        return self.items[-1].id
