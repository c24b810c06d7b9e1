"""User payload decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_bool,
    expect_discriminator,
    expect_map,
    expect_string,
    expect_u64,
    required,
)
from discord_models.models import (
    ConnectionType,
    CurrentUser,
    Relationship,
    RelationshipType,
    SuggestionReason,
    User,
    UserId,
)


def decode_user(value: Any) -> User:
    """Convert a Discord API user object to a User.

    Args:
        value: Raw user object. `bot` and `avatar` may be absent.

    Returns:
        User record
    """
    data = expect_map(value)
    return User(
        id=required(data, "id", UserId.decode),
        avatar=decode_optional(data, "avatar", expect_string),
        bot=decode_optional(data, "bot", expect_bool, default=False),
        discriminator=required(data, "discriminator", expect_string),
        name=required(data, "username", expect_string),
    )


def decode_current_user(value: Any) -> CurrentUser:
    """Convert the logged-in user's object to a CurrentUser."""
    data = expect_map(value)
    return CurrentUser(
        id=required(data, "id", UserId.decode),
        avatar=decode_optional(data, "avatar", expect_string),
        bot=decode_optional(data, "bot", expect_bool, default=False),
        discriminator=required(data, "discriminator", expect_discriminator),
        email=decode_optional(data, "email", expect_string),
        mfa_enabled=required(data, "mfa_enabled", expect_bool),
        mobile=decode_optional(data, "mobile", expect_bool),
        name=required(data, "username", expect_string),
        verified=required(data, "verified", expect_bool),
    )


def decode_relationship(value: Any) -> Relationship:
    data = expect_map(value)
    return Relationship(
        id=required(data, "id", UserId.decode),
        kind=required(data, "type", RelationshipType.decode_by_ordinal),
        user=required(data, "user", decode_user),
    )


def decode_suggestion_reason(value: Any) -> SuggestionReason:
    data = expect_map(value)
    return SuggestionReason(
        name=required(data, "name", expect_string),
        platform=required(data, "platform", ConnectionType.decode_by_name),
        kind=required(data, "kind", expect_u64),
    )
