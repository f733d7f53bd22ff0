"""``/profile/*`` endpoints."""

from __future__ import annotations

from datetime import datetime

from .base import JSON, BaseService, ensure_unix_timestamp


class ProfileService(BaseService):
    async def get_comments_before(
        self, name: str, flags: int, before: datetime | int | float
    ) -> JSON:
        return await self._transport.get(
            "/profile/comments",
            {"name": name, "flags": int(flags), "before": ensure_unix_timestamp(before)},
        )

    async def get_comments_after(
        self, name: str, flags: int, after: datetime | int | float
    ) -> JSON:
        return await self._transport.get(
            "/profile/comments",
            {"name": name, "flags": int(flags), "after": ensure_unix_timestamp(after)},
        )

    async def follow(self, name: str) -> JSON:
        return await self._transport.post("/profile/follow", {"name": name})

    async def unfollow(self, name: str) -> JSON:
        return await self._transport.post("/profile/unfollow", {"name": name})

    async def get_info(self, name: str, flags: int) -> JSON:
        return await self._transport.get("/profile/info", {"name": name, "flags": int(flags)})
