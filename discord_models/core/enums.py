"""Closed enumerations with name and ordinal wire encodings.

Members are declared as ``(token, ordinal)`` tuples. Either part may be
None when the enum has no such encoding. Which encoding a field uses is
decided by the record decoder for that field, never auto-detected.

Usage:
    class OnlineStatus(WireEnum):
        ONLINE = ("online", None)

    OnlineStatus.decode_by_name("online")  # OnlineStatus.ONLINE
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from discord_models.core.accessors import expect_string, expect_u64
from discord_models.core.errors import InvalidEnumValue

if TYPE_CHECKING:
    from typing import Self


class WireEnum(Enum):
    """Base class for enums decoded from the Discord wire format."""

    def __init__(self, token: str | None, ordinal: int | None) -> None:
        self._token = token
        self._ordinal = ordinal

    @property
    def token(self) -> str:
        """The member's string token.

        Only total for enums sent by name. Enums with no name encoding on
        the wire (GameType, MessageType, NotificationLevel,
        RelationshipType, VerificationLevel) have no token to give back.

        Raises:
            TypeError: If the enum has no name encoding.
        """
        if self._token is None:
            raise TypeError(f"{type(self).__name__} has no name encoding")
        return self._token

    @property
    def ordinal(self) -> int:
        """The member's ordinal index.

        Raises:
            TypeError: If the enum has no ordinal encoding, e.g. OnlineStatus.
        """
        if self._ordinal is None:
            raise TypeError(f"{type(self).__name__} has no ordinal encoding")
        return self._ordinal

    @classmethod
    def from_token(cls, token: str) -> "Self | None":
        for member in cls:
            if member._token is not None and member._token == token:
                return member
        return None

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Self | None":
        for member in cls:
            if member._ordinal is not None and member._ordinal == ordinal:
                return member
        return None

    @classmethod
    def decode_by_name(cls, value: Any) -> "Self":
        """Decode a string token into a member.

        Raises:
            TypeMismatch: If the value is not a string.
            InvalidEnumValue: If no member has this token.
        """
        member = cls.from_token(expect_string(value))
        if member is None:
            raise InvalidEnumValue(cls.__name__, value)
        return member

    @classmethod
    def decode_by_ordinal(cls, value: Any) -> "Self":
        """Decode an ordinal index into a member.

        A negative integer is out of range rather than mistyped.
        """
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            raise InvalidEnumValue(cls.__name__, value)
        member = cls.from_ordinal(expect_u64(value))
        if member is None:
            raise InvalidEnumValue(cls.__name__, value)
        return member
