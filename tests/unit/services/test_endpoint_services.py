"""Unit tests for the simple request/response services."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from pr0gramm.core import ItemFlags, UserMark, Vote
from pr0gramm.models import SiteSettings
from pr0gramm.runtime.rest import RESTTransport
from pr0gramm.services import (
    CommentsService,
    ContactService,
    MessagesService,
    ProfileService,
    TagsService,
    UserService,
)
from pr0gramm.services.base import ensure_unix_timestamp


@pytest.fixture
def transport():
    transport = MagicMock(spec=RESTTransport)
    transport.get = AsyncMock(return_value={})
    transport.post = AsyncMock(return_value={"success": True})
    return transport


class TestTagsService:
    @pytest.mark.asyncio
    async def test_add_joins_tags(self, transport):
        """Test tags are comma joined with the submit marker."""
        await TagsService(transport).add(7, ["katze", "süß"])
        transport.post.assert_called_once_with(
            "/tags/add", {"itemId": 7, "tags": "katze,süß", "submit": "Tags speichern"}
        )

    @pytest.mark.asyncio
    async def test_delete(self, transport):
        await TagsService(transport).delete(7, True, 3, [11, 12])
        transport.post.assert_called_once_with(
            "/tags/delete", {"itemId": 7, "tags": [11, 12], "banUsers": True, "days": 3}
        )

    @pytest.mark.asyncio
    async def test_get_details_and_vote(self, transport):
        service = TagsService(transport)
        await service.get_details(7)
        await service.vote(11, Vote.DOWN)
        transport.get.assert_called_once_with("/tags/details", {"itemId": 7})
        transport.post.assert_called_once_with("/tags/vote", {"id": 11, "vote": -1})


class TestCommentsService:
    @pytest.mark.asyncio
    async def test_post_defaults_to_top_level(self, transport):
        await CommentsService(transport).post(5, "hallo")
        transport.post.assert_called_once_with(
            "/comments/post", {"comment": "hallo", "itemId": 5, "parentId": 0}
        )

    @pytest.mark.asyncio
    async def test_edit_and_soft_delete(self, transport):
        service = CommentsService(transport)
        await service.edit(3, "neu")
        await service.soft_delete(3, "spam")
        assert transport.post.call_args_list[0][0] == (
            "/comments/edit",
            {"commentId": 3, "comment": "neu"},
        )
        assert transport.post.call_args_list[1][0] == (
            "/comments/softDelete",
            {"id": 3, "reason": "spam"},
        )

    @pytest.mark.asyncio
    async def test_vote_and_delete(self, transport):
        service = CommentsService(transport)
        await service.vote(3, Vote.UP)
        await service.delete(3, "regel")
        assert transport.post.call_args_list[0][0] == ("/comments/vote", {"id": 3, "vote": 1})
        assert transport.post.call_args_list[1][0] == (
            "/comments/delete",
            {"id": 3, "reason": "regel"},
        )


class TestProfileService:
    @pytest.mark.asyncio
    async def test_comments_before_datetime(self, transport):
        """Test datetimes are sent as integer unix seconds."""
        before = datetime(2020, 1, 1, tzinfo=UTC)
        await ProfileService(transport).get_comments_before("cha0s", ItemFlags.SFW, before)
        transport.get.assert_called_once_with(
            "/profile/comments", {"name": "cha0s", "flags": 1, "before": 1577836800}
        )

    @pytest.mark.asyncio
    async def test_comments_after_number(self, transport):
        await ProfileService(transport).get_comments_after("cha0s", 9, 1500000000.7)
        transport.get.assert_called_once_with(
            "/profile/comments", {"name": "cha0s", "flags": 9, "after": 1500000000}
        )

    @pytest.mark.asyncio
    async def test_follow_unfollow_info(self, transport):
        service = ProfileService(transport)
        await service.follow("a")
        await service.unfollow("a")
        await service.get_info("a", ItemFlags.all())
        assert [c[0][0] for c in transport.post.call_args_list] == [
            "/profile/follow",
            "/profile/unfollow",
        ]
        transport.get.assert_called_once_with("/profile/info", {"name": "a", "flags": 31})


class TestContactAndMessages:
    @pytest.mark.asyncio
    async def test_contact_send(self, transport):
        await ContactService(transport).send("a@b.c", "Betreff", "Text")
        transport.post.assert_called_once_with(
            "/contact/send", {"email": "a@b.c", "subject": "Betreff", "message": "Text"}
        )

    @pytest.mark.asyncio
    async def test_messages(self, transport):
        service = MessagesService(transport)
        await service.get_conversations()
        await service.get_conversations_older(100)
        await service.get_messages("cha0s")
        await service.send_message("cha0s", "hi")

        assert transport.get.call_args_list[0][0] == ("/inbox/conversations",)
        assert transport.get.call_args_list[1][0] == ("/inbox/conversations", {"older": 100})
        assert transport.get.call_args_list[2][0] == ("/inbox/messages", {"with": "cha0s"})
        transport.post.assert_called_once_with(
            "/inbox/post", {"recipientName": "cha0s", "comment": "hi"}
        )


class TestUserService:
    @pytest.mark.asyncio
    async def test_login_skips_nonce(self, transport):
        """Test login is sent without a nonce."""
        await UserService(transport).login("name", "pw")
        transport.post.assert_called_once_with(
            "/user/login", {"name": "name", "password": "pw"}, ignore_nonce=True
        )

    @pytest.mark.asyncio
    async def test_password_reset_mail_skips_nonce(self, transport):
        await UserService(transport).send_password_reset_mail("a@b.c")
        transport.post.assert_called_once_with(
            "/user/sendpasswordresetmail", {"email": "a@b.c"}, ignore_nonce=True
        )

    @pytest.mark.asyncio
    async def test_logout_requires_nonce(self, transport):
        """Test other posts use the default nonce handling."""
        await UserService(transport).logout("sess")
        transport.post.assert_called_once_with("/user/logout", {"id": "sess"})

    @pytest.mark.asyncio
    async def test_site_settings_user_status(self, transport):
        """Test the user status is prefixed with 'um'."""
        settings = SiteSettings(likes_are_public=True, show_ads=False, user_status=UserMark.ADMIN)
        await UserService(transport).set_site_settings(settings)
        transport.post.assert_called_once_with(
            "/user/sitesettings",
            {"likesArePublic": True, "showAds": False, "userStatus": "um3"},
        )

    @pytest.mark.asyncio
    async def test_reads(self, transport):
        service = UserService(transport)
        await service.get_info()
        await service.get_follow_list(ItemFlags.SFW)
        await service.load_invite("tok")
        await service.sync(12)
        assert [c[0] for c in transport.get.call_args_list] == [
            ("/user/info",),
            ("/user/followlist", {"flags": 1}),
            ("/user/loadinvite", {"token": "tok"}),
            ("/user/sync", {"offset": 12}),
        ]

    @pytest.mark.asyncio
    async def test_join_with_invite(self, transport):
        await UserService(transport).join_with_invite("t", "e@x.y", "pw", "n")
        transport.post.assert_called_once_with(
            "/user/joinwithinvite", {"token": "t", "email": "e@x.y", "password": "pw", "name": "n"}
        )


def test_ensure_unix_timestamp():
    """Test timestamp coercion for datetimes and numbers."""
    assert ensure_unix_timestamp(datetime(1970, 1, 1, 0, 1, tzinfo=UTC)) == 60
    assert ensure_unix_timestamp(12.9) == 12
    assert ensure_unix_timestamp(7) == 7
