"""OAuth2 application and webhook records."""

from __future__ import annotations

from dataclasses import dataclass

from discord_models.models.ids import ChannelId, GuildId, UserId, WebhookId
from discord_models.models.user import User


@dataclass(frozen=True)
class BotApplication:
    """The bot user attached to an application, including its token."""

    id: UserId
    avatar: str | None
    bot: bool
    discriminator: int
    name: str
    token: str


@dataclass(frozen=True)
class ApplicationInfo:
    bot: BotApplication | None
    bot_public: bool
    bot_require_code_grant: bool
    description: str
    flags: int | None
    icon: str | None
    id: UserId
    name: str
    redirect_uris: list[str]
    rpc_origins: list[str]
    secret: str


@dataclass(frozen=True)
class CurrentApplicationInfo:
    description: str
    icon: str | None
    id: UserId
    name: str
    owner: User
    rpc_origins: list[str]


@dataclass(frozen=True)
class Webhook:
    id: WebhookId
    avatar: str | None
    channel_id: ChannelId
    guild_id: GuildId | None
    name: str | None
    token: str
    user: User | None
