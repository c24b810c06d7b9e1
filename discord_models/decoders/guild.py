"""Guild payload decoders.

Collections inside a guild payload are arrays on the wire and are
re-keyed by identifier: channels, emojis and roles by `id`, members by
`user.id`, presences and voice states by `user_id`.
"""

from __future__ import annotations

from functools import partial
from typing import Any

from discord_models.core import (
    decode_optional,
    expect_bitfield,
    expect_bool,
    expect_i64,
    expect_map,
    expect_string,
    expect_u64,
    keyed_by,
    required,
    sequence_of,
)
from discord_models.decoders.channel import decode_guild_channel
from discord_models.decoders.presence import decode_presence
from discord_models.decoders.user import decode_user
from discord_models.decoders.voice import decode_voice_state
from discord_models.models import (
    Ban,
    ChannelId,
    ConnectionType,
    Emoji,
    EmojiId,
    EmojiIdentifier,
    Feature,
    Guild,
    GuildEmbed,
    GuildId,
    GuildInfo,
    GuildPrune,
    Integration,
    IntegrationAccount,
    IntegrationId,
    Member,
    PartialGuild,
    PossibleGuild,
    Role,
    RoleId,
    UnavailableGuild,
    UserConnection,
    UserId,
    VerificationLevel,
)


def decode_role(value: Any) -> Role:
    data = expect_map(value)
    return Role(
        id=required(data, "id", RoleId.decode),
        colour=required(data, "color", expect_u64),
        hoist=required(data, "hoist", expect_bool),
        managed=required(data, "managed", expect_bool),
        mentionable=required(data, "mentionable", expect_bool),
        name=required(data, "name", expect_string),
        permissions=required(data, "permissions", expect_bitfield),
        position=required(data, "position", expect_i64),
    )


def decode_emoji(value: Any) -> Emoji:
    data = expect_map(value)
    return Emoji(
        id=required(data, "id", EmojiId.decode),
        name=required(data, "name", expect_string),
        managed=required(data, "managed", expect_bool),
        require_colons=required(data, "require_colons", expect_bool),
        roles=required(data, "roles", sequence_of(RoleId.decode)),
    )


def decode_emoji_identifier(value: Any) -> EmojiIdentifier:
    data = expect_map(value)
    return EmojiIdentifier(
        id=required(data, "id", EmojiId.decode),
        name=required(data, "name", expect_string),
    )


def decode_member(value: Any) -> Member:
    """Convert a guild member object to a Member."""
    data = expect_map(value)
    return Member(
        deaf=required(data, "deaf", expect_bool),
        joined_at=required(data, "joined_at", expect_string),
        mute=required(data, "mute", expect_bool),
        nick=decode_optional(data, "nick", expect_string),
        roles=required(data, "roles", sequence_of(RoleId.decode)),
        user=required(data, "user", decode_user),
    )


def decode_guild(value: Any) -> Guild:
    """Convert a full guild object (as sent on guild create) to a Guild.

    Nested channels omit their `guild_id`; the guild's own id is used.

    Args:
        value: Raw guild object

    Returns:
        Guild record
    """
    data = expect_map(value)
    guild_id = required(data, "id", GuildId.decode)
    channel_decoder = partial(decode_guild_channel, guild_id=guild_id)

    return Guild(
        afk_channel_id=decode_optional(data, "afk_channel_id", ChannelId.decode),
        afk_timeout=required(data, "afk_timeout", expect_u64),
        channels=required(data, "channels", keyed_by(channel_decoder)),
        default_message_notifications=required(
            data, "default_message_notifications", expect_u64
        ),
        emojis=required(data, "emojis", keyed_by(decode_emoji)),
        features=required(data, "features", sequence_of(Feature.decode_by_name)),
        icon=decode_optional(data, "icon", expect_string),
        id=guild_id,
        joined_at=required(data, "joined_at", expect_string),
        large=required(data, "large", expect_bool),
        member_count=required(data, "member_count", expect_u64),
        members=required(data, "members", keyed_by(decode_member, "user.id")),
        mfa_level=required(data, "mfa_level", expect_u64),
        name=required(data, "name", expect_string),
        owner_id=required(data, "owner_id", UserId.decode),
        presences=required(data, "presences", keyed_by(decode_presence, "user_id")),
        region=required(data, "region", expect_string),
        roles=required(data, "roles", keyed_by(decode_role)),
        splash=decode_optional(data, "splash", expect_string),
        verification_level=required(
            data, "verification_level", VerificationLevel.decode_by_ordinal
        ),
        voice_states=required(
            data, "voice_states", keyed_by(decode_voice_state, "user_id")
        ),
    )


def decode_partial_guild(value: Any) -> PartialGuild:
    """Convert a guild object from the REST API, without live state."""
    data = expect_map(value)
    return PartialGuild(
        id=required(data, "id", GuildId.decode),
        afk_channel_id=decode_optional(data, "afk_channel_id", ChannelId.decode),
        afk_timeout=required(data, "afk_timeout", expect_u64),
        default_message_notifications=required(
            data, "default_message_notifications", expect_u64
        ),
        embed_channel_id=decode_optional(data, "embed_channel_id", ChannelId.decode),
        embed_enabled=required(data, "embed_enabled", expect_bool),
        emojis=required(data, "emojis", keyed_by(decode_emoji)),
        features=required(data, "features", sequence_of(Feature.decode_by_name)),
        icon=decode_optional(data, "icon", expect_string),
        mfa_level=required(data, "mfa_level", expect_u64),
        name=required(data, "name", expect_string),
        owner_id=required(data, "owner_id", UserId.decode),
        region=required(data, "region", expect_string),
        roles=required(data, "roles", keyed_by(decode_role)),
        splash=decode_optional(data, "splash", expect_string),
        verification_level=required(
            data, "verification_level", VerificationLevel.decode_by_ordinal
        ),
    )


def decode_possible_guild(value: Any) -> PossibleGuild:
    """Decode a guild that may be unavailable.

    Returns:
        UnavailableGuild when `unavailable` is true, otherwise Guild
    """
    data = expect_map(value)
    unavailable = decode_optional(dict(data), "unavailable", expect_bool, default=False)
    if unavailable:
        return UnavailableGuild(id=required(data, "id", GuildId.decode))
    return decode_guild(data)


def decode_guild_info(value: Any) -> GuildInfo:
    data = expect_map(value)
    return GuildInfo(
        id=required(data, "id", GuildId.decode),
        icon=decode_optional(data, "icon", expect_string),
        name=required(data, "name", expect_string),
        owner=required(data, "owner", expect_bool),
        permissions=required(data, "permissions", expect_bitfield),
    )


def decode_guild_embed(value: Any) -> GuildEmbed:
    data = expect_map(value)
    return GuildEmbed(
        channel_id=required(data, "channel_id", ChannelId.decode),
        enabled=required(data, "enabled", expect_bool),
    )


def decode_guild_prune(value: Any) -> GuildPrune:
    data = expect_map(value)
    return GuildPrune(pruned=required(data, "pruned", expect_u64))


def decode_ban(value: Any) -> Ban:
    data = expect_map(value)
    return Ban(
        reason=decode_optional(data, "reason", expect_string),
        user=required(data, "user", decode_user),
    )


def decode_integration_account(value: Any) -> IntegrationAccount:
    data = expect_map(value)
    return IntegrationAccount(
        id=required(data, "id", expect_string),
        name=required(data, "name", expect_string),
    )


def decode_integration(value: Any) -> Integration:
    data = expect_map(value)
    return Integration(
        id=required(data, "id", IntegrationId.decode),
        account=required(data, "account", decode_integration_account),
        enabled=required(data, "enabled", expect_bool),
        expire_behavior=required(data, "expire_behavior", expect_u64),
        expire_grace_period=required(data, "expire_grace_period", expect_u64),
        kind=required(data, "type", expect_string),
        name=required(data, "name", expect_string),
        role_id=required(data, "role_id", RoleId.decode),
        synced_at=required(data, "synced_at", expect_u64),
        syncing=required(data, "syncing", expect_bool),
        user=required(data, "user", decode_user),
    )


def decode_user_connection(value: Any) -> UserConnection:
    """Convert a third-party connection of the current user."""
    data = expect_map(value)
    return UserConnection(
        id=required(data, "id", expect_string),
        friend_sync=required(data, "friend_sync", expect_bool),
        integrations=required(data, "integrations", sequence_of(decode_integration)),
        kind=required(data, "type", ConnectionType.decode_by_name),
        name=required(data, "name", expect_string),
        revoked=required(data, "revoked", expect_bool),
        visibility=required(data, "visibility", expect_u64),
    )
