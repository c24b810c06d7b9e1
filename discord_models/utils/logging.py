"""Logging setup shared by the decoding CLI and library code.

All rich output goes through the module-level ``console`` so that log
lines, per-file blocks and summary panels interleave cleanly. Library
modules only call ``logging.getLogger(__name__)``; the CLI calls
``setup_logging()`` once before decoding anything.

Usage:
    from discord_models.utils.logging import setup_logging

    setup_logging(level=logging.DEBUG, debug_payloads=True)
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


# Every RichHandler, panel and table prints here
console = Console()

# Logger that records raw fragments of payloads that failed to decode
PAYLOAD_LOGGER = "discord_models.ingest.payloads"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    debug_payloads: bool = False,
) -> None:
    """Install a RichHandler on the shared console, plus an optional log file.

    Args:
        level: Logging level for the root logger (default: INFO)
        log_file: Optional path to a log file for persistent logging
        debug_payloads: If True, also log raw fragments of failed payloads
    """
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    # Raw payload fragments are noisy and may contain user content
    if debug_payloads:
        logging.getLogger(PAYLOAD_LOGGER).setLevel(logging.DEBUG)
    else:
        logging.getLogger(PAYLOAD_LOGGER).setLevel(max(level, logging.INFO))
