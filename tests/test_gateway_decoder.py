"""Tests for gateway, presence and ready decoders."""

from __future__ import annotations

from typing import Any

import pytest

from discord_models.core import NestedDecodeFailure, TypeMismatch
from discord_models.decoders import (
    decode_bot_gateway,
    decode_game,
    decode_gateway,
    decode_presence,
    decode_ready,
)
from discord_models.models import (
    ChannelId,
    GameType,
    GuildId,
    OnlineStatus,
    PrivateChannel,
    UnavailableGuild,
    UserId,
)


class TestDecodeGateway:
    """Tests for gateway URL decoders."""

    def test_gateway(self) -> None:
        assert decode_gateway({"url": "wss://gateway.discord.gg"}).url.startswith("wss")

    def test_bot_gateway(self) -> None:
        gateway = decode_bot_gateway({"url": "wss://gateway.discord.gg", "shards": 2})

        assert gateway.shards == 2


class TestDecodePresence:
    """Tests for decode_presence function."""

    def test_partial_user(self) -> None:
        """A user object with only an id yields no User record."""
        presence = decode_presence({"user": {"id": "100"}, "status": "idle"})

        assert presence.user_id == UserId(100)
        assert presence.user is None
        assert presence.status is OnlineStatus.IDLE
        assert presence.game is None

    def test_full_user(self, user_payload: dict[str, Any]) -> None:
        presence = decode_presence({"user": user_payload, "status": "online"})

        assert presence.user is not None
        assert presence.user.name == "alice"
        assert presence.user_id == presence.user.id

    def test_game_defaults_to_playing(self) -> None:
        presence = decode_presence(
            {"user": {"id": "1"}, "status": "dnd", "game": {"name": "chess"}}
        )

        assert presence.game is not None
        assert presence.game.kind is GameType.PLAYING
        assert presence.game.url is None

    def test_streaming_game(self) -> None:
        game = decode_game(
            {"name": "speedrun", "type": 1, "url": "https://twitch.tv/x"}
        )

        assert game.kind is GameType.STREAMING

    def test_bad_status(self) -> None:
        with pytest.raises(TypeMismatch):
            decode_presence({"user": {"id": "1"}, "status": 1})


class TestDecodeReady:
    """Tests for decode_ready function."""

    def test_bot_session(self, ready_payload: dict[str, Any], guild_id: int) -> None:
        ready = decode_ready(ready_payload)

        assert ready.version == 6
        assert ready.session_id == "abc123"
        assert ready.user.discriminator == 1234
        assert ready.guilds == [UnavailableGuild(id=GuildId(guild_id))]
        assert ready.shard == (0, 1)
        assert ready.trace == ["gateway-prd-main-1"]

    def test_private_channels_keyed(self, ready_payload: dict[str, Any]) -> None:
        ready = decode_ready(ready_payload)

        channel = ready.private_channels[ChannelId(600)]
        assert isinstance(channel, PrivateChannel)
        assert channel.recipient.id == UserId(100)

    def test_optional_sections_default(self, ready_payload: dict[str, Any]) -> None:
        ready = decode_ready(ready_payload)

        assert ready.notes == {}
        assert ready.read_state == {}
        assert ready.user_settings is None
        assert ready.user_guild_settings is None
        assert ready.tutorial is None
        assert ready.experiments is None
        assert ready.analytics_token is None

    def test_user_account_sections(self, ready_payload: dict[str, Any]) -> None:
        ready_payload.update(
            {
                "notes": {"100": "met at the meetup"},
                "read_state": [{"id": "600", "mention_count": 3}],
                "experiments": [[1, 2], [3]],
                "friend_suggestion_count": 0,
                "tutorial": {
                    "indicators_confirmed": ["friends-list"],
                    "indicators_suppressed": False,
                },
            }
        )

        ready = decode_ready(ready_payload)

        assert ready.notes == {UserId(100): "met at the meetup"}
        assert ready.read_state[ChannelId(600)].mention_count == 3
        assert ready.experiments == [[1, 2], [3]]
        assert ready.friend_suggestion_count == 0
        assert ready.tutorial is not None

    def test_user_settings_may_be_absent(self, ready_payload: dict[str, Any]) -> None:
        """Bot sessions receive no user_settings; it is optional, not required."""
        ready_payload.pop("user_settings", None)

        assert decode_ready(ready_payload).user_settings is None

    def test_user_settings_decoded_when_present(
        self, ready_payload: dict[str, Any]
    ) -> None:
        ready_payload["user_settings"] = {
            "convert_emoticons": True,
            "enable_tts_command": False,
            "friend_source_flags": {"all": True},
            "inline_attachment_media": True,
            "inline_embed_media": True,
            "locale": "en-US",
            "message_display_compact": False,
            "render_embeds": True,
            "restricted_guilds": ["2"],
            "show_current_game": True,
            "status": "idle",
            "theme": "dark",
        }

        settings = decode_ready(ready_payload).user_settings

        assert settings is not None
        assert settings.status is OnlineStatus.IDLE
        assert settings.restricted_guilds == [GuildId(2)]
        assert settings.friend_source_flags.all is True

    def test_malformed_user_settings_fail(
        self, ready_payload: dict[str, Any]
    ) -> None:
        ready_payload["user_settings"] = {"locale": "en-US"}

        with pytest.raises(NestedDecodeFailure) as exc_info:
            decode_ready(ready_payload)

        assert exc_info.value.path[0] == "user_settings"

    @pytest.mark.parametrize("shard", [[0], [0, 1, 2], [0, "1"]])
    def test_malformed_shard(self, ready_payload: dict[str, Any], shard: list) -> None:
        ready_payload["shard"] = shard

        with pytest.raises(TypeMismatch) as exc_info:
            decode_ready(ready_payload)

        assert exc_info.value.key == "shard"

    def test_nested_guild_failure(self, ready_payload: dict[str, Any]) -> None:
        ready_payload["guilds"] = [{"unavailable": True}]

        with pytest.raises(NestedDecodeFailure) as exc_info:
            decode_ready(ready_payload)

        assert exc_info.value.path == ["guilds", "id"]
