"""Rich embed records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmbedAuthor:
    icon_url: str | None
    name: str
    proxy_icon_url: str | None
    url: str | None


@dataclass(frozen=True)
class EmbedField:
    inline: bool
    name: str
    value: str


@dataclass(frozen=True)
class EmbedFooter:
    icon_url: str
    proxy_icon_url: str
    text: str


@dataclass(frozen=True)
class EmbedImage:
    height: int
    proxy_url: str
    url: str
    width: int


@dataclass(frozen=True)
class EmbedProvider:
    name: str
    url: str | None


@dataclass(frozen=True)
class EmbedThumbnail:
    height: int
    proxy_url: str
    url: str
    width: int


@dataclass(frozen=True)
class EmbedVideo:
    height: int
    url: str
    width: int


@dataclass(frozen=True)
class Embed:
    """A rich embed attached to a message.

    `colour` is 0 when the embed has no colour bar.
    """

    author: EmbedAuthor | None
    colour: int
    description: str | None
    fields: list[EmbedField] | None
    footer: EmbedFooter | None
    image: EmbedImage | None
    kind: str
    provider: EmbedProvider | None
    thumbnail: EmbedThumbnail | None
    timestamp: str | None
    title: str | None
    url: str | None
    video: EmbedVideo | None
