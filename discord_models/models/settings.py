"""Account settings records delivered to the current user."""

from __future__ import annotations

from dataclasses import dataclass

from discord_models.models.enums import NotificationLevel, OnlineStatus
from discord_models.models.ids import ChannelId, GuildId


@dataclass(frozen=True)
class ChannelOverride:
    channel_id: ChannelId
    message_notifications: NotificationLevel
    muted: bool


@dataclass(frozen=True)
class FriendSourceFlags:
    """Who may send the user friend requests."""

    all: bool
    mutual_friends: bool
    mutual_guilds: bool


@dataclass(frozen=True)
class Tutorial:
    indicators_confirmed: list[str]
    indicators_suppressed: bool


@dataclass(frozen=True)
class UserGuildSettings:
    """Per-guild notification settings. `guild_id` is None for DMs."""

    channel_overrides: list[ChannelOverride]
    guild_id: GuildId | None
    message_notifications: NotificationLevel
    mobile_push: bool
    muted: bool
    suppress_everyone: bool


@dataclass(frozen=True)
class UserSettings:
    convert_emoticons: bool
    enable_tts_command: bool
    friend_source_flags: FriendSourceFlags
    inline_attachment_media: bool
    inline_embed_media: bool
    locale: str
    message_display_compact: bool
    render_embeds: bool
    restricted_guilds: list[GuildId]
    show_current_game: bool
    status: OnlineStatus
    theme: str
