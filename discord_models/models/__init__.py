"""Discord data model records.

All records are frozen dataclasses that exclusively own their nested
records and collections. Identifiers are per-kind snowflake wrappers.
"""

from discord_models.models.application import (
    ApplicationInfo,
    BotApplication,
    CurrentApplicationInfo,
    Webhook,
)
from discord_models.models.channel import (
    Channel,
    Group,
    GuildChannel,
    PermissionOverwrite,
    PrivateChannel,
    ReadState,
)
from discord_models.models.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
    EmbedThumbnail,
    EmbedVideo,
)
from discord_models.models.enums import (
    ChannelType,
    ConnectionType,
    DefaultAvatar,
    Feature,
    GameType,
    IncidentStatus,
    MessageType,
    NotificationLevel,
    OnlineStatus,
    PermissionOverwriteKind,
    Region,
    RelationshipType,
    VerificationLevel,
)
from discord_models.models.gateway import BotGateway, Game, Gateway, Presence, Ready
from discord_models.models.guild import (
    Ban,
    Emoji,
    EmojiIdentifier,
    Guild,
    GuildEmbed,
    GuildInfo,
    GuildPrune,
    Integration,
    IntegrationAccount,
    Member,
    PartialGuild,
    PossibleGuild,
    Role,
    UnavailableGuild,
)
from discord_models.models.ids import (
    ChannelId,
    EmojiId,
    GuildId,
    IntegrationId,
    MessageId,
    RoleId,
    Snowflake,
    UserId,
    WebhookId,
)
from discord_models.models.invite import Invite, InviteChannel, InviteGuild, RichInvite
from discord_models.models.message import (
    Attachment,
    CustomReaction,
    Message,
    MessageReaction,
    Reaction,
    ReactionType,
    SearchResult,
    UnicodeReaction,
)
from discord_models.models.settings import (
    ChannelOverride,
    FriendSourceFlags,
    Tutorial,
    UserGuildSettings,
    UserSettings,
)
from discord_models.models.status import (
    AffectedComponent,
    Incident,
    IncidentUpdate,
    Maintenance,
)
from discord_models.models.user import (
    CurrentUser,
    Relationship,
    SuggestionReason,
    User,
    UserConnection,
)
from discord_models.models.voice import Call, VoiceRegion, VoiceState

__all__ = [
    "AffectedComponent",
    "ApplicationInfo",
    "Attachment",
    "Ban",
    "BotApplication",
    "BotGateway",
    "Call",
    "Channel",
    "ChannelId",
    "ChannelOverride",
    "ChannelType",
    "ConnectionType",
    "CurrentApplicationInfo",
    "CurrentUser",
    "CustomReaction",
    "DefaultAvatar",
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedImage",
    "EmbedProvider",
    "EmbedThumbnail",
    "EmbedVideo",
    "Emoji",
    "EmojiId",
    "EmojiIdentifier",
    "Feature",
    "FriendSourceFlags",
    "Game",
    "GameType",
    "Gateway",
    "Group",
    "Guild",
    "GuildChannel",
    "GuildEmbed",
    "GuildId",
    "GuildInfo",
    "GuildPrune",
    "Incident",
    "IncidentStatus",
    "IncidentUpdate",
    "Integration",
    "IntegrationAccount",
    "IntegrationId",
    "Invite",
    "InviteChannel",
    "InviteGuild",
    "Maintenance",
    "Member",
    "Message",
    "MessageId",
    "MessageReaction",
    "MessageType",
    "NotificationLevel",
    "OnlineStatus",
    "PartialGuild",
    "PermissionOverwrite",
    "PermissionOverwriteKind",
    "PossibleGuild",
    "Presence",
    "PrivateChannel",
    "Reaction",
    "ReactionType",
    "ReadState",
    "Ready",
    "Region",
    "Relationship",
    "RelationshipType",
    "RichInvite",
    "Role",
    "RoleId",
    "SearchResult",
    "Snowflake",
    "SuggestionReason",
    "Tutorial",
    "UnavailableGuild",
    "UnicodeReaction",
    "User",
    "UserConnection",
    "UserGuildSettings",
    "UserId",
    "UserSettings",
    "VerificationLevel",
    "VoiceRegion",
    "VoiceState",
    "Webhook",
    "WebhookId",
]
