"""Account settings decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_bool,
    expect_map,
    expect_string,
    required,
    sequence_of,
)
from discord_models.models import (
    ChannelId,
    ChannelOverride,
    FriendSourceFlags,
    GuildId,
    NotificationLevel,
    OnlineStatus,
    Tutorial,
    UserGuildSettings,
    UserSettings,
)


def decode_channel_override(value: Any) -> ChannelOverride:
    data = expect_map(value)
    return ChannelOverride(
        channel_id=required(data, "channel_id", ChannelId.decode),
        message_notifications=required(
            data, "message_notifications", NotificationLevel.decode_by_ordinal
        ),
        muted=required(data, "muted", expect_bool),
    )


def decode_friend_source_flags(value: Any) -> FriendSourceFlags:
    """Convert friend source flags; each absent flag means False."""
    data = expect_map(value)
    return FriendSourceFlags(
        all=decode_optional(data, "all", expect_bool, default=False),
        mutual_friends=decode_optional(
            data, "mutual_friends", expect_bool, default=False
        ),
        mutual_guilds=decode_optional(
            data, "mutual_guilds", expect_bool, default=False
        ),
    )


def decode_tutorial(value: Any) -> Tutorial:
    data = expect_map(value)
    return Tutorial(
        indicators_confirmed=required(
            data, "indicators_confirmed", sequence_of(expect_string)
        ),
        indicators_suppressed=required(data, "indicators_suppressed", expect_bool),
    )


def decode_user_guild_settings(value: Any) -> UserGuildSettings:
    data = expect_map(value)
    return UserGuildSettings(
        channel_overrides=required(
            data, "channel_overrides", sequence_of(decode_channel_override)
        ),
        guild_id=decode_optional(data, "guild_id", GuildId.decode),
        message_notifications=required(
            data, "message_notifications", NotificationLevel.decode_by_ordinal
        ),
        mobile_push=required(data, "mobile_push", expect_bool),
        muted=required(data, "muted", expect_bool),
        suppress_everyone=required(data, "suppress_everyone", expect_bool),
    )


def decode_user_settings(value: Any) -> UserSettings:
    """Convert the current user's client settings.

    Args:
        value: Raw settings object from the ready payload

    Returns:
        UserSettings record
    """
    data = expect_map(value)
    return UserSettings(
        convert_emoticons=required(data, "convert_emoticons", expect_bool),
        enable_tts_command=required(data, "enable_tts_command", expect_bool),
        friend_source_flags=required(
            data, "friend_source_flags", decode_friend_source_flags
        ),
        inline_attachment_media=required(data, "inline_attachment_media", expect_bool),
        inline_embed_media=required(data, "inline_embed_media", expect_bool),
        locale=required(data, "locale", expect_string),
        message_display_compact=required(data, "message_display_compact", expect_bool),
        render_embeds=required(data, "render_embeds", expect_bool),
        restricted_guilds=required(
            data, "restricted_guilds", sequence_of(GuildId.decode)
        ),
        show_current_game=required(data, "show_current_game", expect_bool),
        status=required(data, "status", OnlineStatus.decode_by_name),
        theme=required(data, "theme", expect_string),
    )
