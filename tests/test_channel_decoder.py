"""Tests for discord_models.decoders.channel."""

from __future__ import annotations

from typing import Any

import pytest

from discord_models.core import (
    InvalidEnumValue,
    MissingField,
    NestedDecodeFailure,
    TypeMismatch,
)
from discord_models.decoders import (
    decode_channel,
    decode_group,
    decode_guild_channel,
    decode_permission_overwrite,
    decode_private_channel,
    decode_read_state,
)
from discord_models.models import (
    ChannelId,
    ChannelType,
    Group,
    GuildChannel,
    GuildId,
    MessageId,
    PermissionOverwriteKind,
    PrivateChannel,
    RoleId,
    UserId,
)


class TestDecodePermissionOverwrite:
    """Tests for decode_permission_overwrite function."""

    def test_role_overwrite(self) -> None:
        overwrite = decode_permission_overwrite(
            {"id": "111", "type": "role", "allow": "1024", "deny": 0}
        )

        assert overwrite.kind is PermissionOverwriteKind.ROLE
        assert overwrite.id == RoleId(111)
        assert overwrite.allow == 1024
        assert overwrite.deny == 0

    def test_member_overwrite_uses_user_id(self) -> None:
        overwrite = decode_permission_overwrite(
            {"id": "111", "type": "member", "allow": 0, "deny": 2048}
        )

        assert overwrite.id == UserId(111)
        assert overwrite.id != RoleId(111)

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidEnumValue):
            decode_permission_overwrite(
                {"id": "111", "type": "everyone", "allow": 0, "deny": 0}
            )


class TestDecodeGuildChannel:
    """Tests for decode_guild_channel function."""

    def test_uses_supplied_guild_id(
        self, channel_payload: dict[str, Any], guild_id: int
    ) -> None:
        """Channels nested in a guild omit guild_id."""
        channel = decode_guild_channel(channel_payload, guild_id=GuildId(guild_id))

        assert channel.guild_id == GuildId(guild_id)
        assert channel.kind is ChannelType.TEXT
        assert channel.name == "general"
        assert channel.last_message_id == MessageId(900)
        assert channel.topic is None
        assert channel.bitrate is None
        assert len(channel.permission_overwrites) == 2

    def test_payload_guild_id_takes_precedence(
        self, channel_payload: dict[str, Any]
    ) -> None:
        channel_payload["guild_id"] = "777"

        channel = decode_guild_channel(channel_payload, guild_id=GuildId(1))

        assert channel.guild_id == GuildId(777)

    def test_requires_some_guild_id(self, channel_payload: dict[str, Any]) -> None:
        with pytest.raises(MissingField) as exc_info:
            decode_guild_channel(channel_payload)

        assert exc_info.value.key == "guild_id"

    def test_voice_channel(self) -> None:
        channel = decode_guild_channel(
            {
                "id": "501",
                "guild_id": "1",
                "type": "voice",
                "name": "Lounge",
                "position": 1,
                "permission_overwrites": [],
                "bitrate": 64000,
                "user_limit": 0,
            }
        )

        assert channel.kind is ChannelType.VOICE
        assert channel.bitrate == 64000
        assert channel.user_limit == 0

    def test_bad_overwrite_path(self, channel_payload: dict[str, Any]) -> None:
        channel_payload["permission_overwrites"][1]["allow"] = "lots"

        with pytest.raises(NestedDecodeFailure) as exc_info:
            decode_guild_channel(channel_payload, guild_id=GuildId(1))

        assert exc_info.value.path == ["permission_overwrites", "allow"]


class TestDecodePrivateChannels:
    """Tests for private and group channel decoders."""

    def test_private_channel_takes_first_recipient(
        self, user_payload: dict[str, Any]
    ) -> None:
        channel = decode_private_channel(
            {"id": "600", "type": "private", "recipients": [user_payload]}
        )

        assert channel.recipient.id == UserId(100)
        assert channel.last_message_id is None

    def test_private_channel_without_recipients(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            decode_private_channel({"id": "600", "type": "private", "recipients": []})

        assert exc_info.value.key == "recipients"

    def test_group_keys_recipients(self, user_payload: dict[str, Any]) -> None:
        group = decode_group(
            {
                "id": "601",
                "type": "group",
                "owner_id": "100",
                "name": None,
                "recipients": [
                    user_payload,
                    {"id": "101", "username": "bob", "discriminator": "0002"},
                ],
            }
        )

        assert group.name is None
        assert set(group.recipients) == {UserId(100), UserId(101)}


class TestDecodeChannel:
    """Tests for the channel dispatcher."""

    def test_dispatches_on_type(
        self, channel_payload: dict[str, Any], user_payload: dict[str, Any]
    ) -> None:
        channel_payload["guild_id"] = "1"
        private = {"id": "600", "type": "private", "recipients": [user_payload]}
        group = {
            "id": "601",
            "type": "group",
            "owner_id": "100",
            "recipients": [user_payload],
        }

        assert isinstance(decode_channel(channel_payload), GuildChannel)
        assert isinstance(decode_channel(private), PrivateChannel)
        assert isinstance(decode_channel(group), Group)

    def test_unknown_type(self, channel_payload: dict[str, Any]) -> None:
        channel_payload["type"] = "stage"

        with pytest.raises(InvalidEnumValue) as exc_info:
            decode_channel(channel_payload)

        assert exc_info.value.key == "type"

    def test_missing_type(self, channel_payload: dict[str, Any]) -> None:
        del channel_payload["type"]

        with pytest.raises(MissingField):
            decode_channel(channel_payload)


class TestDecodeReadState:
    """Tests for decode_read_state function."""

    def test_mention_count_defaults_to_zero(self) -> None:
        state = decode_read_state({"id": "500", "last_message_id": "900"})

        assert state.id == ChannelId(500)
        assert state.mention_count == 0
