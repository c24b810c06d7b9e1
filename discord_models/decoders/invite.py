"""Invite payload decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_bool,
    expect_map,
    expect_string,
    expect_u64,
    required,
)
from discord_models.decoders.user import decode_user
from discord_models.models import (
    ChannelId,
    ChannelType,
    GuildId,
    Invite,
    InviteChannel,
    InviteGuild,
    RichInvite,
)


def decode_invite_channel(value: Any) -> InviteChannel:
    # Invite views carry the numeric channel type.
    data = expect_map(value)
    return InviteChannel(
        id=required(data, "id", ChannelId.decode),
        name=required(data, "name", expect_string),
        kind=required(data, "type", ChannelType.decode_by_ordinal),
    )


def decode_invite_guild(value: Any) -> InviteGuild:
    data = expect_map(value)
    return InviteGuild(
        id=required(data, "id", GuildId.decode),
        icon=decode_optional(data, "icon", expect_string),
        name=required(data, "name", expect_string),
        splash_hash=decode_optional(data, "splash_hash", expect_string),
    )


def decode_invite(value: Any) -> Invite:
    """Convert a public invite object to an Invite."""
    data = expect_map(value)
    return Invite(
        code=required(data, "code", expect_string),
        channel=required(data, "channel", decode_invite_channel),
        guild=required(data, "guild", decode_invite_guild),
    )


def decode_rich_invite(value: Any) -> RichInvite:
    """Convert an invite object including its metadata.

    Args:
        value: Raw invite object as returned to guild managers

    Returns:
        RichInvite record
    """
    data = expect_map(value)
    return RichInvite(
        channel=required(data, "channel", decode_invite_channel),
        code=required(data, "code", expect_string),
        created_at=required(data, "created_at", expect_string),
        guild=required(data, "guild", decode_invite_guild),
        inviter=required(data, "inviter", decode_user),
        max_age=required(data, "max_age", expect_u64),
        max_uses=required(data, "max_uses", expect_u64),
        temporary=required(data, "temporary", expect_bool),
        uses=required(data, "uses", expect_u64),
    )
