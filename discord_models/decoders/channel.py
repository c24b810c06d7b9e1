"""Channel payload decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    MissingField,
    TypeMismatch,
    decode_optional,
    expect_bitfield,
    expect_i64,
    expect_map,
    expect_sequence,
    expect_string,
    expect_u64,
    keyed_by,
    required,
    sequence_of,
)
from discord_models.decoders.user import decode_user
from discord_models.models import (
    Channel,
    ChannelId,
    ChannelType,
    Group,
    GuildChannel,
    GuildId,
    MessageId,
    PermissionOverwrite,
    PermissionOverwriteKind,
    PrivateChannel,
    ReadState,
    RoleId,
    User,
    UserId,
)


def decode_permission_overwrite(value: Any) -> PermissionOverwrite:
    """Convert a permission overwrite; the target id type follows `type`."""
    data = expect_map(value)
    kind = required(data, "type", PermissionOverwriteKind.decode_by_name)
    id_type = UserId if kind is PermissionOverwriteKind.MEMBER else RoleId
    return PermissionOverwrite(
        kind=kind,
        id=required(data, "id", id_type.decode),
        allow=required(data, "allow", expect_bitfield),
        deny=required(data, "deny", expect_bitfield),
    )


def decode_guild_channel(value: Any, guild_id: GuildId | None = None) -> GuildChannel:
    """Convert a Discord API guild channel object to a GuildChannel.

    Args:
        value: Raw channel object
        guild_id: Owning guild, for payloads nested in a guild object
            which omit it. A `guild_id` in the payload takes precedence.

    Returns:
        GuildChannel record
    """
    data = expect_map(value)
    channel_id = required(data, "id", ChannelId.decode)
    payload_guild_id = decode_optional(data, "guild_id", GuildId.decode)
    if payload_guild_id is None:
        if guild_id is None:
            raise MissingField("guild_id")
        payload_guild_id = guild_id

    return GuildChannel(
        id=channel_id,
        bitrate=decode_optional(data, "bitrate", expect_u64),
        guild_id=payload_guild_id,
        kind=required(data, "type", ChannelType.decode_by_name),
        last_message_id=decode_optional(data, "last_message_id", MessageId.decode),
        last_pin_timestamp=decode_optional(data, "last_pin_timestamp", expect_string),
        name=required(data, "name", expect_string),
        permission_overwrites=required(
            data, "permission_overwrites", sequence_of(decode_permission_overwrite)
        ),
        position=required(data, "position", expect_i64),
        topic=decode_optional(data, "topic", expect_string),
        user_limit=decode_optional(data, "user_limit", expect_u64),
    )


def _first_recipient(value: Any) -> User:
    recipients = expect_sequence(value)
    if not recipients:
        raise TypeMismatch("non-empty sequence", value)
    return decode_user(recipients[0])


def decode_private_channel(value: Any) -> PrivateChannel:
    data = expect_map(value)
    return PrivateChannel(
        id=required(data, "id", ChannelId.decode),
        last_message_id=decode_optional(data, "last_message_id", MessageId.decode),
        last_pin_timestamp=decode_optional(data, "last_pin_timestamp", expect_string),
        kind=required(data, "type", ChannelType.decode_by_name),
        recipient=required(data, "recipients", _first_recipient),
    )


def decode_group(value: Any) -> Group:
    data = expect_map(value)
    return Group(
        id=required(data, "id", ChannelId.decode),
        icon=decode_optional(data, "icon", expect_string),
        last_message_id=decode_optional(data, "last_message_id", MessageId.decode),
        last_pin_timestamp=decode_optional(data, "last_pin_timestamp", expect_string),
        name=decode_optional(data, "name", expect_string),
        owner_id=required(data, "owner_id", UserId.decode),
        recipients=required(data, "recipients", keyed_by(decode_user)),
    )


def decode_channel(value: Any) -> Channel:
    """Decode any channel, dispatching on its `type` token.

    Returns:
        Group, PrivateChannel or GuildChannel
    """
    data = expect_map(value)
    # Peek at the type on a copy; the chosen decoder consumes `data`
    kind = required(dict(data), "type", ChannelType.decode_by_name)

    if kind is ChannelType.GROUP:
        return decode_group(data)
    if kind is ChannelType.PRIVATE:
        return decode_private_channel(data)
    return decode_guild_channel(data)


def decode_read_state(value: Any) -> ReadState:
    data = expect_map(value)
    return ReadState(
        id=required(data, "id", ChannelId.decode),
        last_message_id=decode_optional(data, "last_message_id", MessageId.decode),
        last_pin_timestamp=decode_optional(data, "last_pin_timestamp", expect_string),
        mention_count=decode_optional(data, "mention_count", expect_u64, default=0),
    )
