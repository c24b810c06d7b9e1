"""Message records: messages, attachments and reactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from discord_models.models.embed import Embed
from discord_models.models.enums import MessageType
from discord_models.models.ids import (
    ChannelId,
    EmojiId,
    MessageId,
    RoleId,
    UserId,
    WebhookId,
)
from discord_models.models.user import User
from discord_models.utils.time import parse_iso8601


@dataclass(frozen=True)
class Attachment:
    """A file uploaded with a message."""

    id: str
    filename: str
    height: int | None
    proxy_url: str
    size: int
    url: str
    width: int | None

    @property
    def is_image(self) -> bool:
        return self.height is not None and self.width is not None


@dataclass(frozen=True)
class CustomReaction:
    """Reaction with a guild's custom emoji."""

    id: EmojiId
    name: str

    @property
    def key(self) -> str:
        return f"custom:{self.id}"


@dataclass(frozen=True)
class UnicodeReaction:
    """Reaction with a standard unicode emoji."""

    name: str

    @property
    def key(self) -> str:
        return f"unicode:{self.name}"


ReactionType = Union[CustomReaction, UnicodeReaction]


@dataclass(frozen=True)
class MessageReaction:
    """Aggregated reaction count on a message."""

    count: int
    me: bool
    reaction_type: ReactionType


@dataclass(frozen=True)
class Reaction:
    """A single user's reaction, as delivered by reaction events."""

    channel_id: ChannelId
    emoji: ReactionType
    message_id: MessageId
    user_id: UserId


@dataclass(frozen=True)
class Message:
    id: MessageId
    attachments: list[Attachment]
    author: User
    channel_id: ChannelId
    content: str
    edited_timestamp: str | None
    embeds: list[Embed]
    hit: bool
    kind: MessageType
    mention_everyone: bool
    mention_roles: list[RoleId]
    mentions: list[User]
    nonce: str | None
    pinned: bool
    reactions: list[MessageReaction]
    timestamp: str
    tts: bool
    webhook_id: WebhookId | None

    @property
    def sent_at(self) -> datetime | None:
        return parse_iso8601(self.timestamp)

    @property
    def edited_at(self) -> datetime | None:
        return parse_iso8601(self.edited_timestamp)

    def mentions_user(self, user_id: UserId) -> bool:
        return any(user.id == user_id for user in self.mentions)


@dataclass(frozen=True)
class SearchResult:
    """Message search hits; each hit is the match with surrounding context."""

    results: list[list[Message]]
    total: int
