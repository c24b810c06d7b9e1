"""Application and webhook decoders."""

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
    sequence_of,
)
from discord_models.decoders.user import decode_user
from discord_models.models import (
    ApplicationInfo,
    BotApplication,
    ChannelId,
    CurrentApplicationInfo,
    GuildId,
    UserId,
    Webhook,
    WebhookId,
)


def decode_bot_application(value: Any) -> BotApplication:
    """Convert the bot user of an application. `username` maps to `name`."""
    data = expect_map(value)
    return BotApplication(
        id=required(data, "id", UserId.decode),
        avatar=decode_optional(data, "avatar", expect_string),
        bot=decode_optional(data, "bot", expect_bool, default=False),
        discriminator=required(data, "discriminator", expect_discriminator),
        name=required(data, "username", expect_string),
        token=required(data, "token", expect_string),
    )


def decode_application_info(value: Any) -> ApplicationInfo:
    """Convert an application owned by the current user.

    Args:
        value: Raw application object

    Returns:
        ApplicationInfo record; `bot` is None for applications without a
        bot user
    """
    data = expect_map(value)
    return ApplicationInfo(
        bot=decode_optional(data, "bot", decode_bot_application),
        bot_public=required(data, "bot_public", expect_bool),
        bot_require_code_grant=required(data, "bot_require_code_grant", expect_bool),
        description=required(data, "description", expect_string),
        flags=decode_optional(data, "flags", expect_u64),
        icon=decode_optional(data, "icon", expect_string),
        id=required(data, "id", UserId.decode),
        name=required(data, "name", expect_string),
        redirect_uris=required(data, "redirect_uris", sequence_of(expect_string)),
        rpc_origins=required(data, "rpc_origins", sequence_of(expect_string)),
        secret=required(data, "secret", expect_string),
    )


def decode_current_application_info(value: Any) -> CurrentApplicationInfo:
    data = expect_map(value)
    return CurrentApplicationInfo(
        description=required(data, "description", expect_string),
        icon=decode_optional(data, "icon", expect_string),
        id=required(data, "id", UserId.decode),
        name=required(data, "name", expect_string),
        owner=required(data, "owner", decode_user),
        rpc_origins=decode_optional(
            data, "rpc_origins", sequence_of(expect_string), default=[]
        ),
    )


def decode_webhook(value: Any) -> Webhook:
    data = expect_map(value)
    return Webhook(
        id=required(data, "id", WebhookId.decode),
        avatar=decode_optional(data, "avatar", expect_string),
        channel_id=required(data, "channel_id", ChannelId.decode),
        guild_id=decode_optional(data, "guild_id", GuildId.decode),
        name=decode_optional(data, "name", expect_string),
        token=required(data, "token", expect_string),
        user=decode_optional(data, "user", decode_user),
    )
