"""``/inbox/*`` endpoints (private messages)."""

from __future__ import annotations

from .base import JSON, BaseService


class MessagesService(BaseService):
    async def get_conversations(self) -> JSON:
        return await self._transport.get("/inbox/conversations")

    async def get_conversations_older(self, older: int) -> JSON:
        return await self._transport.get("/inbox/conversations", {"older": older})

    async def get_messages(self, user: str) -> JSON:
        return await self._transport.get("/inbox/messages", {"with": user})

    async def send_message(self, recipient_name: str, comment: str) -> JSON:
        return await self._transport.post(
            "/inbox/post", {"recipientName": recipient_name, "comment": comment}
        )
