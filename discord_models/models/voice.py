"""Voice records: voice states, regions and group calls."""

from __future__ import annotations

from dataclasses import dataclass

from discord_models.models.enums import Region
from discord_models.models.ids import ChannelId, MessageId, UserId


@dataclass(frozen=True)
class VoiceState:
    channel_id: ChannelId | None
    deaf: bool
    mute: bool
    self_deaf: bool
    self_mute: bool
    session_id: str
    suppress: bool
    token: str | None
    user_id: UserId


@dataclass(frozen=True)
class VoiceRegion:
    custom: bool
    deprecated: bool
    id: str
    name: str
    optimal: bool
    sample_hostname: str
    sample_port: int
    vip: bool


@dataclass(frozen=True)
class Call:
    """An active call in a group or private channel."""

    channel_id: ChannelId
    message_id: MessageId
    region: str
    ringing: list[UserId]
    unavailable: bool
    voice_states: dict[UserId, VoiceState]

    @property
    def voice_region(self) -> Region | None:
        return Region.from_token(self.region)
