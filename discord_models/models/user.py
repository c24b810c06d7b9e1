"""User records.

User is the public identity of an account. CurrentUser is the account the
bot is logged in as, which carries private fields (email, mfa, verified).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from discord_models.models.enums import ConnectionType, DefaultAvatar, RelationshipType
from discord_models.models.ids import UserId

if TYPE_CHECKING:
    from discord_models.models.guild import Integration


@dataclass(frozen=True)
class User:
    """Discord user as embedded in messages, members, bans and so on."""

    id: UserId
    avatar: str | None
    bot: bool
    discriminator: str
    name: str

    @property
    def default_avatar(self) -> DefaultAvatar:
        """Avatar shown when the user has not uploaded one."""
        try:
            index = int(self.discriminator) % 5
        except ValueError:
            index = 0
        return DefaultAvatar.from_ordinal(index) or DefaultAvatar.BLURPLE

    @property
    def distinct(self) -> str:
        """The ``name#discriminator`` tag."""
        return f"{self.name}#{self.discriminator}"


@dataclass(frozen=True)
class CurrentUser:
    id: UserId
    avatar: str | None
    bot: bool
    discriminator: int
    email: str | None
    mfa_enabled: bool
    mobile: bool | None
    name: str
    verified: bool


@dataclass(frozen=True)
class Relationship:
    """Friend, block or pending request between the current user and another."""

    id: UserId
    kind: RelationshipType
    user: User


@dataclass(frozen=True)
class UserConnection:
    """A third-party account linked to a user."""

    id: str
    friend_sync: bool
    integrations: list[Integration]
    kind: ConnectionType
    name: str
    revoked: bool
    visibility: int


@dataclass(frozen=True)
class SuggestionReason:
    name: str
    platform: ConnectionType
    kind: int
