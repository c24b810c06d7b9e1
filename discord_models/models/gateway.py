"""Gateway records: the session bootstrap payload and presence data."""

from __future__ import annotations

from dataclasses import dataclass

from discord_models.models.channel import Channel, ReadState
from discord_models.models.enums import GameType, OnlineStatus
from discord_models.models.guild import PossibleGuild
from discord_models.models.ids import ChannelId, UserId
from discord_models.models.settings import Tutorial, UserGuildSettings, UserSettings
from discord_models.models.user import CurrentUser, Relationship, User


@dataclass(frozen=True)
class Gateway:
    url: str


@dataclass(frozen=True)
class BotGateway:
    """Gateway URL plus the shard count recommended for the bot."""

    shards: int
    url: str


@dataclass(frozen=True)
class Game:
    kind: GameType
    name: str
    url: str | None


@dataclass(frozen=True)
class Presence:
    """Online status and activity of a user.

    `user` is only set when the payload carried a full user object rather
    than just its id.
    """

    game: Game | None
    last_modified: int | None
    nick: str | None
    status: OnlineStatus
    user_id: UserId
    user: User | None


@dataclass(frozen=True)
class Ready:
    """First payload of a gateway session."""

    analytics_token: str | None
    experiments: list[list[int]] | None
    friend_suggestion_count: int | None
    guilds: list[PossibleGuild]
    notes: dict[UserId, str]
    presences: dict[UserId, Presence]
    private_channels: dict[ChannelId, Channel]
    read_state: dict[ChannelId, ReadState]
    relationships: dict[UserId, Relationship]
    session_id: str
    shard: tuple[int, int] | None
    trace: list[str] | None
    tutorial: Tutorial | None
    user: CurrentUser
    user_guild_settings: list[UserGuildSettings] | None
    user_settings: UserSettings | None
    version: int
