"""Invite records.

Invite is the public view of an invite code; RichInvite adds the
metadata only visible to members who can manage the guild.
"""

from __future__ import annotations

from dataclasses import dataclass

from discord_models.models.enums import ChannelType
from discord_models.models.ids import ChannelId, GuildId
from discord_models.models.user import User


@dataclass(frozen=True)
class InviteChannel:
    id: ChannelId
    name: str
    kind: ChannelType


@dataclass(frozen=True)
class InviteGuild:
    id: GuildId
    icon: str | None
    name: str
    splash_hash: str | None


@dataclass(frozen=True)
class Invite:
    code: str
    channel: InviteChannel
    guild: InviteGuild

    @property
    def url(self) -> str:
        return f"https://discord.gg/{self.code}"


@dataclass(frozen=True)
class RichInvite:
    channel: InviteChannel
    code: str
    created_at: str
    guild: InviteGuild
    inviter: User
    max_age: int
    max_uses: int
    temporary: bool
    uses: int
