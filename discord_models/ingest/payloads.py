"""Decoding of raw payloads read from JSON files.

A malformed payload never aborts a batch: its error is logged and the
payload is counted as failed.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from discord_models.config.settings import BotSettings
from discord_models.core import DecodeError
from discord_models.decoders import (
    decode_application_info,
    decode_ban,
    decode_bot_gateway,
    decode_call,
    decode_channel,
    decode_current_application_info,
    decode_current_user,
    decode_embed,
    decode_emoji,
    decode_gateway,
    decode_guild,
    decode_guild_channel,
    decode_guild_embed,
    decode_guild_info,
    decode_guild_prune,
    decode_incident,
    decode_integration,
    decode_invite,
    decode_maintenance,
    decode_member,
    decode_message,
    decode_partial_guild,
    decode_possible_guild,
    decode_presence,
    decode_reaction,
    decode_read_state,
    decode_ready,
    decode_relationship,
    decode_rich_invite,
    decode_role,
    decode_search_result,
    decode_user,
    decode_user_connection,
    decode_user_guild_settings,
    decode_user_settings,
    decode_voice_region,
    decode_voice_state,
    decode_webhook,
)
from discord_models.ingest.logger import logger

log = logging.getLogger(__name__)

# Top-level payload kinds and their decoders
DECODERS: dict[str, Callable[[Any], Any]] = {
    "application_info": decode_application_info,
    "ban": decode_ban,
    "bot_gateway": decode_bot_gateway,
    "call": decode_call,
    "channel": decode_channel,
    "current_application_info": decode_current_application_info,
    "current_user": decode_current_user,
    "embed": decode_embed,
    "emoji": decode_emoji,
    "gateway": decode_gateway,
    "guild": decode_guild,
    "guild_channel": decode_guild_channel,
    "guild_embed": decode_guild_embed,
    "guild_info": decode_guild_info,
    "guild_prune": decode_guild_prune,
    "incident": decode_incident,
    "integration": decode_integration,
    "invite": decode_invite,
    "maintenance": decode_maintenance,
    "member": decode_member,
    "message": decode_message,
    "partial_guild": decode_partial_guild,
    "possible_guild": decode_possible_guild,
    "presence": decode_presence,
    "reaction": decode_reaction,
    "read_state": decode_read_state,
    "ready": decode_ready,
    "relationship": decode_relationship,
    "rich_invite": decode_rich_invite,
    "role": decode_role,
    "search_result": decode_search_result,
    "user": decode_user,
    "user_connection": decode_user_connection,
    "user_guild_settings": decode_user_guild_settings,
    "user_settings": decode_user_settings,
    "voice_region": decode_voice_region,
    "voice_state": decode_voice_state,
    "webhook": decode_webhook,
}


class PayloadTooLarge(Exception):
    """Raised when an input file exceeds the configured size limit."""

    def __init__(self, path: Path, size: int, limit: int) -> None:
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"{path} is {size:,} bytes (limit {limit:,})")


@dataclass
class DecodeStats:
    """Outcome of decoding one input file."""

    decoded: int = 0
    failed: int = 0
    records: list[Any] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.decoded + self.failed


def get_decoder(kind: str) -> Callable[[Any], Any]:
    """Look up the decoder for a payload kind.

    Raises:
        ValueError: If no decoder is registered for `kind`
    """
    try:
        return DECODERS[kind]
    except KeyError:
        raise ValueError(f"Unknown payload kind: {kind!r}") from None


def _fragment(payload: Any, limit: int) -> str:
    text = json.dumps(payload, ensure_ascii=False, default=str)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def load_payloads(path: str | Path, max_bytes: int) -> list[Any]:
    """Read the payloads stored in a JSON file.

    A top-level array is a batch of payloads; any other value is a single
    payload.

    Args:
        path: JSON file to read
        max_bytes: Largest accepted file size

    Returns:
        List of raw payloads

    Raises:
        PayloadTooLarge: If the file is larger than `max_bytes`
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    size = path.stat().st_size
    if size > max_bytes:
        raise PayloadTooLarge(path, size, max_bytes)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return data
    return [data]


def decode_payload(
    kind: str,
    payload: Any,
    settings: BotSettings | None = None,
    source: str | None = None,
) -> Any | None:
    """Decode one payload, isolating any decode failure.

    Args:
        kind: Payload kind, a key of DECODERS
        payload: Raw JSON value
        settings: Controls how much of a failed payload is logged
        source: Where the payload came from, for log messages

    Returns:
        The decoded record, or None if the payload was malformed
    """
    decoder = get_decoder(kind)
    try:
        return decoder(payload)
    except DecodeError as e:
        settings = settings or BotSettings()
        logger.decode_failure(kind, e, source)
        log.debug(f"Raw payload: {_fragment(payload, settings.log_fragment_chars)}")
        return None


def decode_file(
    path: str | Path,
    kind: str,
    settings: BotSettings | None = None,
) -> DecodeStats:
    """Decode every payload in a JSON file.

    Args:
        path: JSON file holding one payload or an array of payloads
        kind: Payload kind, a key of DECODERS
        settings: Size limit and logging settings

    Returns:
        DecodeStats with the decoded records in input order
    """
    get_decoder(kind)
    settings = settings or BotSettings()
    stats = DecodeStats()

    for index, payload in enumerate(load_payloads(path, settings.max_payload_bytes)):
        record = decode_payload(kind, payload, settings, source=f"{path}[{index}]")
        if record is None:
            stats.failed += 1
        else:
            stats.decoded += 1
            stats.records.append(record)

    return stats
