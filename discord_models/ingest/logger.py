"""Rich-based logging utilities for payload decoding.

Provides console output for decode failures and a summary panel for a
decoding run.
"""

from __future__ import annotations

from typing import Any

from discord_models.core import DecodeError
from discord_models.utils.pipeline_logger import BasePipelineLogger


class DecodeLogger(BasePipelineLogger):
    """Logger for payload decoding with rich output.

    Extends BasePipelineLogger with decode-specific methods for failure
    reporting and the final summary.
    """

    def __init__(self) -> None:
        super().__init__(__name__)

    # -------------------------------------------------------------------------
    # Decode-specific: Failures
    # -------------------------------------------------------------------------

    def decode_failure(
        self, kind: str, error: DecodeError, source: str | None = None
    ) -> None:
        """Log a payload that failed to decode, with the path to the bad field."""
        where = f" ({source})" if source else ""
        self._logger.warning(f"Failed to decode {kind}{where}: {error}")

    def unreadable(self, source: str, reason: str) -> None:
        """Log an input that could not be read or parsed as JSON."""
        self._logger.error(f"Cannot read {source}: {reason}")

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def summary(
        self,
        files: int = 0,
        decoded: int = 0,
        failed: int = 0,
        unreadable: int = 0,
        elapsed: float = 0.0,
        **kwargs: Any,
    ) -> None:
        """Print final decode summary."""
        stats: dict[str, int | str] = {
            "Files": files,
            "Payloads decoded": decoded,
            "Payloads failed": failed,
        }
        if unreadable:
            stats["Files unreadable"] = unreadable
        self.print_summary(
            "Decode",
            elapsed=elapsed,
            stats=stats,
            style="red" if failed or unreadable else "cyan",
        )


# Global logger instance
logger = DecodeLogger()
