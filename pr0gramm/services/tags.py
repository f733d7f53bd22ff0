"""``/tags/*`` endpoints."""

from __future__ import annotations

from ..core.enums import Vote
from ..models import ItemID, create_tag_list
from .base import JSON, BaseService

ADD_TAGS_SUBMIT = "Tags speichern"


class TagsService(BaseService):
    async def add(self, item_id: ItemID, tags: list[str]) -> JSON:
        return await self._transport.post(
            "/tags/add",
            {"itemId": item_id, "tags": create_tag_list(tags), "submit": ADD_TAGS_SUBMIT},
        )

    async def delete(self, item_id: ItemID, ban_users: bool, days: int, tags: list[int]) -> JSON:
        """Delete tags (by tag id) from an item, optionally banning their authors."""
        return await self._transport.post(
            "/tags/delete",
            {"itemId": item_id, "tags": list(tags), "banUsers": ban_users, "days": days},
        )

    async def get_details(self, item_id: ItemID) -> JSON:
        return await self._transport.get("/tags/details", {"itemId": item_id})

    async def vote(self, tag_id: int, absolute_vote: Vote) -> JSON:
        return await self._transport.post("/tags/vote", {"id": tag_id, "vote": int(absolute_vote)})
