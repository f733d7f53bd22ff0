"""Endpoint services, one per API area."""

from .comments import CommentsService
from .contact import ContactService
from .items import GET_ITEMS_SPEC, ItemsPageAdapter, ItemsPageFetcher, ItemsService
from .messages import MessagesService
from .profile import ProfileService
from .tags import TagsService
from .user import UserService

__all__ = [
    "CommentsService",
    "ContactService",
    "GET_ITEMS_SPEC",
    "ItemsPageAdapter",
    "ItemsPageFetcher",
    "ItemsService",
    "MessagesService",
    "ProfileService",
    "TagsService",
    "UserService",
]
