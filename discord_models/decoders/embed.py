"""Embed payload decoders."""

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
from discord_models.models import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
    EmbedThumbnail,
    EmbedVideo,
)


def decode_embed_author(value: Any) -> EmbedAuthor:
    data = expect_map(value)
    return EmbedAuthor(
        icon_url=decode_optional(data, "icon_url", expect_string),
        name=required(data, "name", expect_string),
        proxy_icon_url=decode_optional(data, "proxy_icon_url", expect_string),
        url=decode_optional(data, "url", expect_string),
    )


def decode_embed_field(value: Any) -> EmbedField:
    data = expect_map(value)
    return EmbedField(
        inline=required(data, "inline", expect_bool),
        name=required(data, "name", expect_string),
        value=required(data, "value", expect_string),
    )


def decode_embed_footer(value: Any) -> EmbedFooter:
    data = expect_map(value)
    return EmbedFooter(
        icon_url=required(data, "icon_url", expect_string),
        proxy_icon_url=required(data, "proxy_icon_url", expect_string),
        text=required(data, "text", expect_string),
    )


def decode_embed_image(value: Any) -> EmbedImage:
    data = expect_map(value)
    return EmbedImage(
        height=required(data, "height", expect_u64),
        proxy_url=required(data, "proxy_url", expect_string),
        url=required(data, "url", expect_string),
        width=required(data, "width", expect_u64),
    )


def decode_embed_provider(value: Any) -> EmbedProvider:
    data = expect_map(value)
    return EmbedProvider(
        name=required(data, "name", expect_string),
        url=decode_optional(data, "url", expect_string),
    )


def decode_embed_thumbnail(value: Any) -> EmbedThumbnail:
    data = expect_map(value)
    return EmbedThumbnail(
        height=required(data, "height", expect_u64),
        proxy_url=required(data, "proxy_url", expect_string),
        url=required(data, "url", expect_string),
        width=required(data, "width", expect_u64),
    )


def decode_embed_video(value: Any) -> EmbedVideo:
    data = expect_map(value)
    return EmbedVideo(
        height=required(data, "height", expect_u64),
        url=required(data, "url", expect_string),
        width=required(data, "width", expect_u64),
    )


def decode_embed(value: Any) -> Embed:
    """Convert a rich embed object to an Embed.

    Only `type` is required; a missing `color` decodes to 0.
    """
    data = expect_map(value)
    return Embed(
        author=decode_optional(data, "author", decode_embed_author),
        colour=decode_optional(data, "color", expect_u64, default=0),
        description=decode_optional(data, "description", expect_string),
        fields=decode_optional(data, "fields", sequence_of(decode_embed_field)),
        footer=decode_optional(data, "footer", decode_embed_footer),
        image=decode_optional(data, "image", decode_embed_image),
        kind=required(data, "type", expect_string),
        provider=decode_optional(data, "provider", decode_embed_provider),
        thumbnail=decode_optional(data, "thumbnail", decode_embed_thumbnail),
        timestamp=decode_optional(data, "timestamp", expect_string),
        title=decode_optional(data, "title", expect_string),
        url=decode_optional(data, "url", expect_string),
        video=decode_optional(data, "video", decode_embed_video),
    )
