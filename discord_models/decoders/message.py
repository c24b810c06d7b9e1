"""Message payload decoders."""

from __future__ import annotations

from typing import Any

from discord_models.core import (
    decode_optional,
    expect_bool,
    expect_map,
    expect_string,
    expect_u64,
    required,
    sequence_of,
)
from discord_models.decoders.embed import decode_embed
from discord_models.decoders.user import decode_user
from discord_models.models import (
    Attachment,
    ChannelId,
    CustomReaction,
    EmojiId,
    Message,
    MessageId,
    MessageReaction,
    MessageType,
    Reaction,
    ReactionType,
    RoleId,
    SearchResult,
    UnicodeReaction,
    UserId,
    WebhookId,
)


def decode_attachment(value: Any) -> Attachment:
    """Convert a message attachment; `height`/`width` are set for images."""
    data = expect_map(value)
    return Attachment(
        id=required(data, "id", expect_string),
        filename=required(data, "filename", expect_string),
        height=decode_optional(data, "height", expect_u64),
        proxy_url=required(data, "proxy_url", expect_string),
        size=required(data, "size", expect_u64),
        url=required(data, "url", expect_string),
        width=decode_optional(data, "width", expect_u64),
    )


def decode_reaction_type(value: Any) -> ReactionType:
    """Convert a reaction emoji object.

    A non-null `id` marks a custom guild emoji; otherwise `name` holds
    the unicode emoji itself.
    """
    data = expect_map(value)
    emoji_id = decode_optional(data, "id", EmojiId.decode)
    name = required(data, "name", expect_string)
    if emoji_id is None:
        return UnicodeReaction(name=name)
    return CustomReaction(id=emoji_id, name=name)


def decode_message_reaction(value: Any) -> MessageReaction:
    data = expect_map(value)
    return MessageReaction(
        count=required(data, "count", expect_u64),
        me=required(data, "me", expect_bool),
        reaction_type=required(data, "emoji", decode_reaction_type),
    )


def decode_reaction(value: Any) -> Reaction:
    """Convert a reaction add/remove event payload."""
    data = expect_map(value)
    return Reaction(
        channel_id=required(data, "channel_id", ChannelId.decode),
        emoji=required(data, "emoji", decode_reaction_type),
        message_id=required(data, "message_id", MessageId.decode),
        user_id=required(data, "user_id", UserId.decode),
    )


def decode_message(value: Any) -> Message:
    """Convert a Discord API message object to a Message.

    Args:
        value: Raw message object

    Returns:
        Message record. `hit` defaults to False and `reactions` to an
        empty list when absent.
    """
    data = expect_map(value)
    return Message(
        id=required(data, "id", MessageId.decode),
        attachments=required(data, "attachments", sequence_of(decode_attachment)),
        author=required(data, "author", decode_user),
        channel_id=required(data, "channel_id", ChannelId.decode),
        content=required(data, "content", expect_string),
        edited_timestamp=decode_optional(data, "edited_timestamp", expect_string),
        embeds=required(data, "embeds", sequence_of(decode_embed)),
        hit=decode_optional(data, "hit", expect_bool, default=False),
        kind=required(data, "type", MessageType.decode_by_ordinal),
        mention_everyone=required(data, "mention_everyone", expect_bool),
        mention_roles=required(data, "mention_roles", sequence_of(RoleId.decode)),
        mentions=required(data, "mentions", sequence_of(decode_user)),
        nonce=decode_optional(data, "nonce", expect_string),
        pinned=required(data, "pinned", expect_bool),
        reactions=decode_optional(
            data, "reactions", sequence_of(decode_message_reaction), default=[]
        ),
        timestamp=required(data, "timestamp", expect_string),
        tts=required(data, "tts", expect_bool),
        webhook_id=decode_optional(data, "webhook_id", WebhookId.decode),
    )


def _decode_search_hits(value: Any) -> list[list[Message]]:
    return sequence_of(sequence_of(decode_message))(value)


def decode_search_result(value: Any) -> SearchResult:
    data = expect_map(value)
    return SearchResult(
        results=required(data, "messages", _decode_search_hits),
        total=required(data, "total_results", expect_u64),
    )
