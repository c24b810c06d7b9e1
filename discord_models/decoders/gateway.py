"""Gateway decoders, including the ready payload that opens a session."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    TypeMismatch,
    decode_keyed_object,
    decode_optional,
    expect_map,
    expect_sequence,
    expect_string,
    expect_u64,
    keyed_by,
    required,
    sequence_of,
)
from discord_models.decoders.channel import decode_channel, decode_read_state
from discord_models.decoders.guild import decode_possible_guild
from discord_models.decoders.presence import decode_presence
from discord_models.decoders.settings import (
    decode_tutorial,
    decode_user_guild_settings,
    decode_user_settings,
)
from discord_models.decoders.user import decode_current_user, decode_relationship
from discord_models.models import BotGateway, Gateway, Ready, UserId


def decode_gateway(value: Any) -> Gateway:
    data = expect_map(value)
    return Gateway(url=required(data, "url", expect_string))


def decode_bot_gateway(value: Any) -> BotGateway:
    data = expect_map(value)
    return BotGateway(
        shards=required(data, "shards", expect_u64),
        url=required(data, "url", expect_string),
    )


def _decode_shard(value: Any) -> tuple[int, int]:
    # [shard_id, shard_count]
    items = expect_sequence(value)
    if len(items) != 2:
        raise TypeMismatch("sequence of 2 integers", value)
    shard_id, shard_count = (expect_u64(item) for item in items)
    return shard_id, shard_count


def _decode_notes(value: Any) -> dict[UserId, str]:
    return decode_keyed_object(value, UserId.decode, expect_string)


def decode_ready(value: Any) -> Ready:
    """Convert the ready payload sent when a gateway session starts.

    Presences and relationships are keyed by user id, private channels
    and read states by channel id. `notes` and `read_state` default to
    empty maps when absent.

    Args:
        value: Raw `d` object of the READY dispatch

    Returns:
        Ready record
    """
    data = expect_map(value)
    return Ready(
        analytics_token=decode_optional(data, "analytics_token", expect_string),
        experiments=decode_optional(
            data, "experiments", sequence_of(sequence_of(expect_u64))
        ),
        friend_suggestion_count=decode_optional(
            data, "friend_suggestion_count", expect_u64
        ),
        guilds=required(data, "guilds", sequence_of(decode_possible_guild)),
        notes=decode_optional(data, "notes", _decode_notes, default={}),
        presences=required(data, "presences", keyed_by(decode_presence, "user_id")),
        private_channels=required(data, "private_channels", keyed_by(decode_channel)),
        read_state=decode_optional(
            data, "read_state", keyed_by(decode_read_state), default={}
        ),
        relationships=required(data, "relationships", keyed_by(decode_relationship)),
        session_id=required(data, "session_id", expect_string),
        shard=decode_optional(data, "shard", _decode_shard),
        trace=decode_optional(data, "_trace", sequence_of(expect_string)),
        tutorial=decode_optional(data, "tutorial", decode_tutorial),
        user=required(data, "user", decode_current_user),
        user_guild_settings=decode_optional(
            data, "user_guild_settings", sequence_of(decode_user_guild_settings)
        ),
        user_settings=decode_optional(data, "user_settings", decode_user_settings),
        version=required(data, "v", expect_u64),
    )
