"""Identifier types.

Every Discord entity kind has its own identifier type wrapping the same
64-bit snowflake. Identifiers of different kinds never compare equal, so a
UserId cannot stand in for a ChannelId even when the numbers match.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from discord_models.core.accessors import expect_snowflake
from discord_models.utils.snowflake import snowflake_to_datetime

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True, order=True)
class Snowflake:
    """Base identifier: an unsigned 64-bit snowflake."""

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def created_at(self) -> datetime:
        """Creation time embedded in the snowflake."""
        return snowflake_to_datetime(self.value)

    @classmethod
    def decode(cls, value: Any) -> "Self":
        """Decode from a numeric literal or a numeric string."""
        return cls(expect_snowflake(value))


class ChannelId(Snowflake):
    pass


class EmojiId(Snowflake):
    pass


class GuildId(Snowflake):
    pass


class IntegrationId(Snowflake):
    pass


class MessageId(Snowflake):
    pass


class RoleId(Snowflake):
    pass


class UserId(Snowflake):
    pass


class WebhookId(Snowflake):
    pass
