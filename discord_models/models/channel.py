"""Channel records.

A channel is one of three shapes, distinguished by its ``type`` token:

- GuildChannel: text or voice channel inside a guild
- PrivateChannel: direct message channel with one recipient
- Group: group DM with several recipients
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from discord_models.models.enums import ChannelType, PermissionOverwriteKind
from discord_models.models.ids import ChannelId, GuildId, MessageId, RoleId, UserId
from discord_models.models.user import User


@dataclass(frozen=True)
class PermissionOverwrite:
    """Channel-level allow/deny for a single member or role.

    `id` is a UserId for member overwrites and a RoleId for role overwrites.
    """

    kind: PermissionOverwriteKind
    id: UserId | RoleId
    allow: int
    deny: int


@dataclass(frozen=True)
class GuildChannel:
    id: ChannelId
    bitrate: int | None
    guild_id: GuildId
    kind: ChannelType
    last_message_id: MessageId | None
    last_pin_timestamp: str | None
    name: str
    permission_overwrites: list[PermissionOverwrite]
    position: int
    topic: str | None
    user_limit: int | None


@dataclass(frozen=True)
class PrivateChannel:
    id: ChannelId
    last_message_id: MessageId | None
    last_pin_timestamp: str | None
    kind: ChannelType
    recipient: User


@dataclass(frozen=True)
class Group:
    id: ChannelId
    icon: str | None
    last_message_id: MessageId | None
    last_pin_timestamp: str | None
    name: str | None
    owner_id: UserId
    recipients: dict[UserId, User]


Channel = Union[GuildChannel, PrivateChannel, Group]


@dataclass(frozen=True)
class ReadState:
    """Last-read position of the current user in a channel."""

    id: ChannelId
    last_message_id: MessageId | None
    last_pin_timestamp: str | None
    mention_count: int
