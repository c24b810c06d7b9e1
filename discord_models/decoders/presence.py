"""Presence payload decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_map,
    expect_string,
    expect_u64,
    required,
)
from discord_models.decoders.user import decode_user
from discord_models.models import Game, GameType, OnlineStatus, Presence, User, UserId


def decode_game(value: Any) -> Game:
    """Convert a game/activity object. A missing `type` means playing."""
    data = expect_map(value)
    return Game(
        kind=decode_optional(
            data, "type", GameType.decode_by_ordinal, default=GameType.PLAYING
        ),
        name=required(data, "name", expect_string),
        url=decode_optional(data, "url", expect_string),
    )


def _decode_presence_user(value: Any) -> tuple[UserId, User | None]:
    # Presence updates usually carry only {"id": ...}; anything more is a
    # full user object.
    data = expect_map(value)
    if len(data) > 1:
        user = decode_user(data)
        return user.id, user
    return required(data, "id", UserId.decode), None


def decode_presence(value: Any) -> Presence:
    """Convert a presence object.

    Args:
        value: Raw presence object with a partial or full `user`

    Returns:
        Presence record; `user` is None for a partial user object
    """
    data = expect_map(value)
    user_id, user = required(data, "user", _decode_presence_user)
    return Presence(
        game=decode_optional(data, "game", decode_game),
        last_modified=decode_optional(data, "last_modified", expect_u64),
        nick=decode_optional(data, "nick", expect_string),
        status=required(data, "status", OnlineStatus.decode_by_name),
        user_id=user_id,
        user=user,
    )
