"""``/contact/*`` endpoints."""

from __future__ import annotations

from .base import JSON, BaseService


class ContactService(BaseService):
    async def send(self, email: str, subject: str, message: str) -> JSON:
        return await self._transport.post(
            "/contact/send", {"email": email, "subject": subject, "message": message}
        )
