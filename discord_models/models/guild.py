"""Guild records.

Guild is the full object delivered when the current user joins or loads a
guild; PartialGuild is the REST view without live state (members,
presences, voice states). UnavailableGuild stands in for a guild that is
known but currently offline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from discord_models.models.enums import Feature, Region, VerificationLevel
from discord_models.models.ids import (
    ChannelId,
    EmojiId,
    GuildId,
    IntegrationId,
    RoleId,
    UserId,
)
from discord_models.models.user import User

if TYPE_CHECKING:
    from discord_models.models.channel import GuildChannel
    from discord_models.models.gateway import Presence
    from discord_models.models.voice import VoiceState


@dataclass(frozen=True)
class Role:
    id: RoleId
    colour: int
    hoist: bool
    managed: bool
    mentionable: bool
    name: str
    permissions: int
    position: int


@dataclass(frozen=True)
class Emoji:
    id: EmojiId
    name: str
    managed: bool
    require_colons: bool
    roles: list[RoleId]


@dataclass(frozen=True)
class EmojiIdentifier:
    id: EmojiId
    name: str


@dataclass(frozen=True)
class Member:
    """A user's membership in one guild."""

    deaf: bool
    joined_at: str
    mute: bool
    nick: str | None
    roles: list[RoleId]
    user: User

    @property
    def display_name(self) -> str:
        return self.nick or self.user.name


@dataclass(frozen=True)
class Guild:
    afk_channel_id: ChannelId | None
    afk_timeout: int
    channels: dict[ChannelId, GuildChannel]
    default_message_notifications: int
    emojis: dict[EmojiId, Emoji]
    features: list[Feature]
    icon: str | None
    id: GuildId
    joined_at: str
    large: bool
    member_count: int
    members: dict[UserId, Member]
    mfa_level: int
    name: str
    owner_id: UserId
    presences: dict[UserId, Presence]
    region: str
    roles: dict[RoleId, Role]
    splash: str | None
    verification_level: VerificationLevel
    voice_states: dict[UserId, VoiceState]

    @property
    def voice_region(self) -> Region | None:
        """The region as a known Region, or None for an unlisted one."""
        return Region.from_token(self.region)

    @property
    def everyone_role_id(self) -> RoleId:
        """The @everyone role shares the guild's snowflake."""
        return RoleId(self.id.value)


@dataclass(frozen=True)
class PartialGuild:
    id: GuildId
    afk_channel_id: ChannelId | None
    afk_timeout: int
    default_message_notifications: int
    embed_channel_id: ChannelId | None
    embed_enabled: bool
    emojis: dict[EmojiId, Emoji]
    features: list[Feature]
    icon: str | None
    mfa_level: int
    name: str
    owner_id: UserId
    region: str
    roles: dict[RoleId, Role]
    splash: str | None
    verification_level: VerificationLevel


@dataclass(frozen=True)
class UnavailableGuild:
    """A guild the current user is in, but which is offline."""

    id: GuildId


PossibleGuild = Union[Guild, UnavailableGuild]


@dataclass(frozen=True)
class GuildInfo:
    """A guild as listed for the current user."""

    id: GuildId
    icon: str | None
    name: str
    owner: bool
    permissions: int


@dataclass(frozen=True)
class GuildEmbed:
    channel_id: ChannelId
    enabled: bool


@dataclass(frozen=True)
class GuildPrune:
    pruned: int


@dataclass(frozen=True)
class Ban:
    reason: str | None
    user: User


@dataclass(frozen=True)
class IntegrationAccount:
    id: str
    name: str


@dataclass(frozen=True)
class Integration:
    id: IntegrationId
    account: IntegrationAccount
    enabled: bool
    expire_behavior: int
    expire_grace_period: int
    kind: str
    name: str
    role_id: RoleId
    synced_at: int
    syncing: bool
    user: User
