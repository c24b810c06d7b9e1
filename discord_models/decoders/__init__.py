"""Decoders for converting Discord API JSON to data model records."""

from discord_models.decoders.application import (
    decode_application_info,
    decode_bot_application,
    decode_current_application_info,
    decode_webhook,
)
from discord_models.decoders.channel import (
    decode_channel,
    decode_group,
    decode_guild_channel,
    decode_permission_overwrite,
    decode_private_channel,
    decode_read_state,
)
from discord_models.decoders.embed import (
    decode_embed,
    decode_embed_author,
    decode_embed_field,
    decode_embed_footer,
    decode_embed_image,
    decode_embed_provider,
    decode_embed_thumbnail,
    decode_embed_video,
)
from discord_models.decoders.gateway import (
    decode_bot_gateway,
    decode_gateway,
    decode_ready,
)
from discord_models.decoders.guild import (
    decode_ban,
    decode_emoji,
    decode_emoji_identifier,
    decode_guild,
    decode_guild_embed,
    decode_guild_info,
    decode_guild_prune,
    decode_integration,
    decode_integration_account,
    decode_member,
    decode_partial_guild,
    decode_possible_guild,
    decode_role,
    decode_user_connection,
)
from discord_models.decoders.invite import (
    decode_invite,
    decode_invite_channel,
    decode_invite_guild,
    decode_rich_invite,
)
from discord_models.decoders.message import (
    decode_attachment,
    decode_message,
    decode_message_reaction,
    decode_reaction,
    decode_reaction_type,
    decode_search_result,
)
from discord_models.decoders.presence import (
    decode_game,
    decode_presence,
)
from discord_models.decoders.settings import (
    decode_channel_override,
    decode_friend_source_flags,
    decode_tutorial,
    decode_user_guild_settings,
    decode_user_settings,
)
from discord_models.decoders.status import (
    decode_affected_component,
    decode_incident,
    decode_incident_update,
    decode_maintenance,
)
from discord_models.decoders.user import (
    decode_current_user,
    decode_relationship,
    decode_suggestion_reason,
    decode_user,
)
from discord_models.decoders.voice import (
    decode_call,
    decode_voice_region,
    decode_voice_state,
)

__all__ = [
    "decode_affected_component",
    "decode_application_info",
    "decode_attachment",
    "decode_ban",
    "decode_bot_application",
    "decode_bot_gateway",
    "decode_call",
    "decode_channel",
    "decode_channel_override",
    "decode_current_application_info",
    "decode_current_user",
    "decode_embed",
    "decode_embed_author",
    "decode_embed_field",
    "decode_embed_footer",
    "decode_embed_image",
    "decode_embed_provider",
    "decode_embed_thumbnail",
    "decode_embed_video",
    "decode_emoji",
    "decode_emoji_identifier",
    "decode_friend_source_flags",
    "decode_game",
    "decode_gateway",
    "decode_group",
    "decode_guild",
    "decode_guild_channel",
    "decode_guild_embed",
    "decode_guild_info",
    "decode_guild_prune",
    "decode_incident",
    "decode_incident_update",
    "decode_integration",
    "decode_integration_account",
    "decode_invite",
    "decode_invite_channel",
    "decode_invite_guild",
    "decode_maintenance",
    "decode_member",
    "decode_message",
    "decode_message_reaction",
    "decode_partial_guild",
    "decode_permission_overwrite",
    "decode_possible_guild",
    "decode_presence",
    "decode_private_channel",
    "decode_reaction",
    "decode_reaction_type",
    "decode_read_state",
    "decode_ready",
    "decode_relationship",
    "decode_rich_invite",
    "decode_role",
    "decode_search_result",
    "decode_suggestion_reason",
    "decode_tutorial",
    "decode_user",
    "decode_user_connection",
    "decode_user_guild_settings",
    "decode_user_settings",
    "decode_voice_region",
    "decode_voice_state",
    "decode_webhook",
]
