"""Voice payload decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_bool,
    expect_map,
    expect_string,
    expect_u64,
    keyed_by,
    required,
    sequence_of,
)
from discord_models.models import (
    Call,
    ChannelId,
    MessageId,
    UserId,
    VoiceRegion,
    VoiceState,
)


def decode_voice_state(value: Any) -> VoiceState:
    """Convert a voice state; `channel_id` is absent once the user leaves."""
    data = expect_map(value)
    return VoiceState(
        channel_id=decode_optional(data, "channel_id", ChannelId.decode),
        deaf=required(data, "deaf", expect_bool),
        mute=required(data, "mute", expect_bool),
        self_deaf=required(data, "self_deaf", expect_bool),
        self_mute=required(data, "self_mute", expect_bool),
        session_id=required(data, "session_id", expect_string),
        suppress=required(data, "suppress", expect_bool),
        token=decode_optional(data, "token", expect_string),
        user_id=required(data, "user_id", UserId.decode),
    )


def decode_voice_region(value: Any) -> VoiceRegion:
    data = expect_map(value)
    return VoiceRegion(
        custom=required(data, "custom", expect_bool),
        deprecated=required(data, "deprecated", expect_bool),
        id=required(data, "id", expect_string),
        name=required(data, "name", expect_string),
        optimal=required(data, "optimal", expect_bool),
        sample_hostname=required(data, "sample_hostname", expect_string),
        sample_port=required(data, "sample_port", expect_u64),
        vip=required(data, "vip", expect_bool),
    )


def decode_call(value: Any) -> Call:
    data = expect_map(value)
    return Call(
        channel_id=required(data, "channel_id", ChannelId.decode),
        message_id=required(data, "message_id", MessageId.decode),
        region=required(data, "region", expect_string),
        ringing=required(data, "ringing", sequence_of(UserId.decode)),
        unavailable=required(data, "unavailable", expect_bool),
        voice_states=required(
            data, "voice_states", keyed_by(decode_voice_state, "user_id")
        ),
    )
