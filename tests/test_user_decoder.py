"""Tests for discord_models.decoders.user."""

from __future__ import annotations

from typing import Any

import pytest

from discord_models.core import MissingField, NestedDecodeFailure, TypeMismatch
from discord_models.decoders import (
    decode_current_user,
    decode_relationship,
    decode_suggestion_reason,
    decode_user,
)
from discord_models.models import (
    ConnectionType,
    DefaultAvatar,
    RelationshipType,
    UserId,
)


class TestDecodeUser:
    """Tests for decode_user function."""

    def test_minimal_user(self, user_payload: dict[str, Any]) -> None:
        """Optional fields default when absent."""
        user = decode_user(user_payload)

        assert user.id == UserId(100)
        assert user.name == "alice"
        assert user.discriminator == "0001"
        assert user.bot is False
        assert user.avatar is None

    def test_full_user(self) -> None:
        user = decode_user(
            {
                "id": 80351110224678912,
                "username": "Nelly",
                "discriminator": "1337",
                "avatar": "8342729096ea3675442027381ff50dfe",
                "bot": True,
            }
        )

        assert user.avatar == "8342729096ea3675442027381ff50dfe"
        assert user.bot is True
        assert user.distinct == "Nelly#1337"

    def test_ignores_unknown_keys(self, user_payload: dict[str, Any]) -> None:
        user_payload["email"] = "alice@example.com"
        user_payload["flags"] = 64

        assert decode_user(user_payload).name == "alice"

    def test_missing_username(self, user_payload: dict[str, Any]) -> None:
        del user_payload["username"]

        with pytest.raises(MissingField) as exc_info:
            decode_user(user_payload)

        assert exc_info.value.key == "username"

    def test_not_a_map(self) -> None:
        with pytest.raises(TypeMismatch):
            decode_user(["100", "alice"])

    @pytest.mark.parametrize(
        ("discriminator", "expected"),
        [
            ("0000", DefaultAvatar.BLURPLE),
            ("0001", DefaultAvatar.GREY),
            ("0007", DefaultAvatar.GREEN),
            ("1338", DefaultAvatar.ORANGE),
            ("9999", DefaultAvatar.RED),
        ],
    )
    def test_default_avatar(self, discriminator: str, expected: DefaultAvatar) -> None:
        user = decode_user(
            {"id": "1", "username": "u", "discriminator": discriminator}
        )

        assert user.default_avatar is expected


class TestDecodeCurrentUser:
    """Tests for decode_current_user function."""

    def test_parses_discriminator_as_int(self) -> None:
        user = decode_current_user(
            {
                "id": "42",
                "username": "trot",
                "discriminator": "0042",
                "mfa_enabled": True,
                "verified": False,
                "email": None,
            }
        )

        assert user.discriminator == 42
        assert user.email is None
        assert user.mobile is None
        assert user.mfa_enabled is True

    def test_invalid_discriminator(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            decode_current_user(
                {
                    "id": "42",
                    "username": "trot",
                    "discriminator": "abcd",
                    "mfa_enabled": True,
                    "verified": False,
                }
            )

        assert exc_info.value.key == "discriminator"


class TestDecodeRelationship:
    """Tests for decode_relationship function."""

    def test_maps_type_ordinal(self, user_payload: dict[str, Any]) -> None:
        relationship = decode_relationship(
            {"id": "100", "type": 4, "user": user_payload}
        )

        assert relationship.kind is RelationshipType.OUTGOING_REQUEST
        assert relationship.user.id == relationship.id

    def test_nested_user_failure(self) -> None:
        with pytest.raises(NestedDecodeFailure) as exc_info:
            decode_relationship({"id": "100", "type": 1, "user": {"id": "100"}})

        assert exc_info.value.path == ["user", "discriminator"]


class TestDecodeSuggestionReason:
    """Tests for decode_suggestion_reason function."""

    def test_platform_by_name(self) -> None:
        reason = decode_suggestion_reason(
            {"name": "alice", "platform": "steam", "kind": 1}
        )

        assert reason.platform is ConnectionType.STEAM
        assert reason.kind == 1
