"""Enumerations shared across services."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class ItemFlags(IntFlag):
    """Content filter bit set accepted by item and profile endpoints."""

    SFW = 1
    NSFW = 2
    NSFL = 4
    NSFP = 8
    POL = 16

    @classmethod
    def all(cls) -> ItemFlags:
        return cls.SFW | cls.NSFW | cls.NSFL | cls.NSFP | cls.POL


class Vote(IntEnum):
    """Absolute vote value for items, tags and comments."""

    DOWN = -1
    NEUTRAL = 0
    UP = 1
    FAVORITE = 2


class UserMark(IntEnum):
    """User rank marks as used by ``/user/sitesettings``."""

    SCHWUCHTEL = 0
    NEUSCHWUCHTEL = 1
    ALTSCHWUCHTEL = 2
    ADMIN = 3
    GESPERRT = 4
    MODERATOR = 5
    FLIESENTISCHBESITZER = 6
    LEBENDE_LEGENDE = 7
    WICHTEL = 8
    EDLER_SPENDER = 9
    MITTELALTSCHWUCHTEL = 10
    ALTMODERATOR = 11
    COMMUNITY_HELFER = 12
    NUTZER_BOT = 13
    SYSTEM_BOT = 14
    ALT_HELFER = 15
