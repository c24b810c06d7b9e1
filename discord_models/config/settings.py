"""Configuration management using pydantic-settings.

Provides validated configuration with support for:
- JSON config file (config.json)
- Environment variables with the TROT_ prefix (e.g. TROT_TOKEN)
- Type coercion and validation
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from discord_models.utils.ids import parse_snowflake

if TYPE_CHECKING:
    from discord_models.models import User


class BotSettings(BaseSettings):
    """Bot settings with validation.

    Values from the JSON config file take precedence; environment
    variables fill in whatever the file leaves out.
    """

    token: str = ""
    owner_id: int | None = None
    max_payload_bytes: int = Field(default=8 * 1024 * 1024, gt=0)
    log_fragment_chars: int = Field(default=200, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="TROT_",
        extra="ignore",
    )

    @field_validator("token", mode="before")
    @classmethod
    def strip_token(cls, v: Any) -> Any:
        """Tolerate surrounding whitespace from copy-pasted tokens."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("owner_id", mode="before")
    @classmethod
    def parse_owner_id(cls, v: Any) -> int | None:
        """Accept the owner id as a snowflake string or integer."""
        if v is None or v == "":
            return None
        owner_id = parse_snowflake(v)
        if owner_id is None:
            raise ValueError(f"owner_id is not a valid snowflake: {v!r}")
        return owner_id

    @classmethod
    def from_json(cls, path: str | Path = "config.json") -> "BotSettings":
        """Load settings from a JSON config file.

        Args:
            path: Path to the JSON config file

        Returns:
            BotSettings instance with validated configuration
        """
        config_path = Path(path)
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(**data)
        return cls()

    def is_owner(self, user: "User") -> bool:
        """Whether `user` is the configured bot owner."""
        return self.owner_id is not None and user.id.value == self.owner_id


@lru_cache
def get_settings(config_path: str = "config.json") -> BotSettings:
    """Get cached bot settings.

    Args:
        config_path: Path to JSON config file (default: config.json)

    Returns:
        Cached BotSettings instance
    """
    return BotSettings.from_json(config_path)
