"""Request option models for state-changing endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import UserMark


class DeleteItemOptions(BaseModel):
    """Form fields for ``/items/delete``."""

    item_id: int = Field(..., alias="itemId")
    days: int = 0
    ban_user: bool = Field(default=False, alias="banUser")
    notify_user: bool = Field(default=False, alias="notifyUser")
    reason: str = Field(..., min_length=1)
    custom_reason: str = Field(default="", alias="customReason")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_form(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SiteSettings(BaseModel):
    """Form fields for ``/user/sitesettings``."""

    likes_are_public: bool = Field(..., alias="likesArePublic")
    show_ads: bool = Field(..., alias="showAds")
    user_status: UserMark = Field(..., alias="userStatus")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_form(self) -> dict[str, Any]:
        return {
            "likesArePublic": self.likes_are_public,
            "showAds": self.show_ads,
            "userStatus": f"um{int(self.user_status)}",
        }
