"""Shared fixtures for discord-models tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def guild_id() -> int:
    """Sample guild ID (also @everyone role ID)."""
    return 123456789


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """Minimal user object as embedded in most payloads."""
    return {"id": "100", "username": "alice", "discriminator": "0001"}


@pytest.fixture
def role_payloads() -> list[dict[str, Any]]:
    """Guild roles for permission testing."""
    base = {"hoist": False, "managed": False, "mentionable": False, "color": 0}
    return [
        {
            **base,
            "id": "123456789",  # @everyone role (same as guild_id)
            "name": "@everyone",
            "permissions": "104324673",  # Default permissions, includes VIEW_CHANNEL
            "position": 0,
        },
        {
            **base,
            "id": "111111111",
            "name": "Member",
            "permissions": "1024",  # VIEW_CHANNEL only
            "position": 1,
        },
        {
            **base,
            "id": "222222222",
            "name": "Voice",
            "permissions": 1048576,  # CONNECT
            "position": 2,
        },
        {
            **base,
            "id": "333333333",
            "name": "Admin",
            "permissions": "8",  # ADMINISTRATOR
            "position": 3,
        },
    ]


@pytest.fixture
def channel_payload() -> dict[str, Any]:
    """Text channel as nested in a guild payload (no guild_id)."""
    return {
        "id": "500",
        "type": "text",
        "name": "general",
        "position": 0,
        "permission_overwrites": [
            {
                "id": "123456789",  # @everyone
                "type": "role",
                "allow": 0,
                "deny": 1024,  # Deny VIEW_CHANNEL
            },
            {
                "id": "111111111",  # Member role
                "type": "role",
                "allow": 1024,  # Allow VIEW_CHANNEL
                "deny": 0,
            },
        ],
        "topic": None,
        "last_message_id": "900",
    }


@pytest.fixture
def member_payload(user_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "deaf": False,
        "mute": False,
        "joined_at": "2017-01-01T00:00:00+00:00",
        "nick": None,
        "roles": ["111111111"],
        "user": user_payload,
    }


@pytest.fixture
def guild_payload(
    guild_id: int,
    role_payloads: list[dict[str, Any]],
    channel_payload: dict[str, Any],
    member_payload: dict[str, Any],
) -> dict[str, Any]:
    """Full guild object as sent on guild create."""
    return {
        "id": str(guild_id),
        "name": "Test Guild",
        "afk_channel_id": None,
        "afk_timeout": 300,
        "channels": [channel_payload],
        "default_message_notifications": 0,
        "emojis": [
            {
                "id": "700",
                "name": "blob",
                "managed": False,
                "require_colons": True,
                "roles": [],
            }
        ],
        "features": ["INVITE_SPLASH"],
        "icon": None,
        "joined_at": "2017-01-01T00:00:00+00:00",
        "large": False,
        "member_count": 1,
        "members": [member_payload],
        "mfa_level": 0,
        "owner_id": "42",
        "presences": [{"user": {"id": "100"}, "status": "online"}],
        "region": "eu-west",
        "roles": role_payloads,
        "splash": None,
        "verification_level": 1,
        "voice_states": [],
    }


@pytest.fixture
def message_payload(user_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": "800",
        "attachments": [],
        "author": user_payload,
        "channel_id": "500",
        "content": "hello",
        "edited_timestamp": None,
        "embeds": [],
        "type": 0,
        "mention_everyone": False,
        "mention_roles": ["111111111"],
        "mentions": [],
        "pinned": False,
        "timestamp": "2017-02-01T12:00:00.000000+00:00",
        "tts": False,
    }


@pytest.fixture
def ready_payload(guild_id: int, user_payload: dict[str, Any]) -> dict[str, Any]:
    """Ready payload of a bot session with one unavailable guild."""
    return {
        "v": 6,
        "session_id": "abc123",
        "user": {
            "id": "42",
            "username": "trot",
            "discriminator": "1234",
            "bot": True,
            "mfa_enabled": False,
            "verified": True,
        },
        "guilds": [{"id": str(guild_id), "unavailable": True}],
        "presences": [],
        "private_channels": [
            {
                "id": "600",
                "type": "private",
                "recipients": [user_payload],
                "last_message_id": None,
            }
        ],
        "relationships": [],
        "shard": [0, 1],
        "_trace": ["gateway-prd-main-1"],
    }
