"""``/comments/*`` endpoints."""

from __future__ import annotations

from ..core.enums import Vote
from ..models import ItemID
from .base import JSON, BaseService


class CommentsService(BaseService):
    async def delete(self, comment_id: int, reason: str) -> JSON:
        return await self._transport.post("/comments/delete", {"id": comment_id, "reason": reason})

    async def soft_delete(self, comment_id: int, reason: str) -> JSON:
        return await self._transport.post(
            "/comments/softDelete", {"id": comment_id, "reason": reason}
        )

    async def edit(self, comment_id: int, new_content: str) -> JSON:
        return await self._transport.post(
            "/comments/edit", {"commentId": comment_id, "comment": new_content}
        )

    async def vote(self, comment_id: int, absolute_vote: Vote) -> JSON:
        return await self._transport.post(
            "/comments/vote", {"id": comment_id, "vote": int(absolute_vote)}
        )

    async def post(self, item_id: ItemID, content: str, reply_to: int = 0) -> JSON:
        """Post a comment; ``reply_to`` is the parent comment id, 0 for top level."""
        return await self._transport.post(
            "/comments/post", {"comment": content, "itemId": item_id, "parentId": reply_to}
        )
