"""Tests for WireEnum and the model enumerations."""

from __future__ import annotations

import pytest

from discord_models.core import InvalidEnumValue, TypeMismatch, WireEnum
from discord_models.models import (
    ChannelType,
    GameType,
    MessageType,
    NotificationLevel,
    OnlineStatus,
    RelationshipType,
    VerificationLevel,
)
from discord_models.models.enums import ALL_ENUMS


def _members_with_tokens() -> list[WireEnum]:
    return [m for enum in ALL_ENUMS for m in enum if m._token is not None]


def _members_with_ordinals() -> list[WireEnum]:
    return [m for enum in ALL_ENUMS for m in enum if m._ordinal is not None]


class TestRoundTrip:
    """Every member survives encode-then-decode in each encoding it has."""

    @pytest.mark.parametrize("member", _members_with_tokens(), ids=repr)
    def test_by_name(self, member: WireEnum) -> None:
        assert type(member).decode_by_name(member.token) is member

    @pytest.mark.parametrize("member", _members_with_ordinals(), ids=repr)
    def test_by_ordinal(self, member: WireEnum) -> None:
        assert type(member).decode_by_ordinal(member.ordinal) is member

    @pytest.mark.parametrize("enum", ALL_ENUMS, ids=lambda e: e.__name__)
    def test_encodings_are_unique(self, enum: type[WireEnum]) -> None:
        tokens = [m._token for m in enum if m._token is not None]
        ordinals = [m._ordinal for m in enum if m._ordinal is not None]

        assert len(tokens) == len(set(tokens))
        assert len(ordinals) == len(set(ordinals))


class TestChannelType:
    """ChannelType supports both encodings."""

    def test_by_name(self) -> None:
        assert ChannelType.decode_by_name("text") is ChannelType.TEXT

    def test_by_ordinal(self) -> None:
        assert ChannelType.decode_by_ordinal(2) is ChannelType.TEXT

    def test_unknown_token(self) -> None:
        with pytest.raises(InvalidEnumValue) as exc_info:
            ChannelType.decode_by_name("bogus")

        assert exc_info.value.kind == "ChannelType"
        assert exc_info.value.value == "bogus"

    def test_wrong_type_for_encoding(self) -> None:
        """A number where a token is expected is a type mismatch."""
        with pytest.raises(TypeMismatch):
            ChannelType.decode_by_name(2)
        with pytest.raises(TypeMismatch):
            ChannelType.decode_by_ordinal("text")

    def test_out_of_range_ordinal(self) -> None:
        with pytest.raises(InvalidEnumValue):
            ChannelType.decode_by_ordinal(4)
        with pytest.raises(InvalidEnumValue):
            ChannelType.decode_by_ordinal(-1)

    def test_bool_is_not_an_ordinal(self) -> None:
        with pytest.raises(TypeMismatch):
            ChannelType.decode_by_ordinal(True)


class TestSingleEncodingEnums:
    """Enums without a name or ordinal encoding."""

    def test_online_status_tokens(self) -> None:
        assert OnlineStatus.decode_by_name("dnd") is OnlineStatus.DO_NOT_DISTURB

    def test_online_status_has_no_ordinal(self) -> None:
        with pytest.raises(TypeError):
            OnlineStatus.ONLINE.ordinal
        with pytest.raises(InvalidEnumValue):
            OnlineStatus.decode_by_ordinal(0)

    @pytest.mark.parametrize(
        "enum",
        [GameType, MessageType, NotificationLevel, RelationshipType, VerificationLevel],
        ids=lambda e: e.__name__,
    )
    def test_ordinal_only_enums_have_no_token(self, enum: type[WireEnum]) -> None:
        for member in enum:
            with pytest.raises(TypeError, match="no name encoding"):
                member.token
            with pytest.raises(InvalidEnumValue):
                enum.decode_by_name(member.name.lower())

    def test_verification_level_ordinals(self) -> None:
        """Ordinals follow the alphabetical wire table, not severity."""
        assert VerificationLevel.decode_by_ordinal(0) is VerificationLevel.HIGH
        assert VerificationLevel.decode_by_ordinal(3) is VerificationLevel.NONE

    def test_relationship_type_ordinals(self) -> None:
        assert RelationshipType.decode_by_ordinal(1) is RelationshipType.FRIENDS

    def test_lookup_helpers(self) -> None:
        assert ChannelType.from_token("voice") is ChannelType.VOICE
        assert ChannelType.from_token("stage") is None
        assert ChannelType.from_ordinal(9) is None
