"""Item filter options shared by every page request of one stream."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import ItemFlags


def create_tag_list(tags: list[str] | tuple[str, ...]) -> str:
    """Join tags the way the API expects them (comma separated)."""
    return ",".join(tags)


class ItemsFilter(BaseModel):
    """Query constraints for ``/items/get``.

    Frozen: a stream reuses one instance for every page, so it must not change
    mid-stream. Start a new stream with a new filter instead.
    """

    flags: int = Field(default=int(ItemFlags.SFW), ge=0)
    promoted: bool = False
    self_only: bool = Field(default=False, alias="self")
    tags: tuple[str, ...] | None = None
    user: str | None = None
    likes: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        if isinstance(value, list):
            return tuple(value)
        return value

    def to_query(self) -> dict[str, Any]:
        """Raw query parameters; ``None`` values are dropped by the transport."""
        return {
            "flags": int(self.flags),
            "promoted": 1 if self.promoted else 0,
            "self": 1 if self.self_only else 0,
            "tags": create_tag_list(self.tags) if self.tags else None,
            "user": self.user,
            "likes": self.likes,
        }
