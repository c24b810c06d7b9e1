"""CLI entry point for discord_models.ingest.

Usage:
    python -m discord_models.ingest message messages.json    # Decode messages
    python -m discord_models.ingest guild a.json b.json      # Decode several files
    python -m discord_models.ingest ready ready.json -v      # Show more details
    python -m discord_models.ingest ready ready.json --debug # Log raw failed payloads
    python -m discord_models.ingest --list-kinds             # Show payload kinds
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time

from discord_models.config.settings import get_settings
from discord_models.ingest.logger import logger
from discord_models.ingest.payloads import DECODERS, PayloadTooLarge, decode_file
from discord_models.utils.logging import setup_logging


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Decode Discord API JSON payloads into typed records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m discord_models.ingest message messages.json
      Decode every message in messages.json

  python -m discord_models.ingest guild guilds/*.json
      Decode guild payloads from several files

  python -m discord_models.ingest ready ready.json --config /path/to/config.json
      Use a custom config file

  python -m discord_models.ingest ready ready.json --debug
      Enable debug logging including raw fragments of failed payloads
        """,
    )

    parser.add_argument(
        "kind",
        nargs="?",
        help="Payload kind to decode (see --list-kinds)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="JSON files holding one payload or an array of payloads",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config.json",
        help="Path to config.json (default: config.json)",
    )
    parser.add_argument(
        "--list-kinds",
        action="store_true",
        help="List the supported payload kinds and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with raw payload fragments",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Optional file to write logs to",
    )

    args = parser.parse_args()

    if args.list_kinds:
        for kind in sorted(DECODERS):
            logger.console.print(kind)
        return

    if not args.kind or not args.files:
        parser.error("a payload kind and at least one file are required")
    if args.kind not in DECODERS:
        parser.error(f"unknown payload kind {args.kind!r} (see --list-kinds)")

    # Configure logging based on CLI flags
    if args.debug:
        log_level = logging.DEBUG
        debug_payloads = True
    elif args.verbose:
        log_level = logging.DEBUG
        debug_payloads = False
    else:
        log_level = logging.INFO
        debug_payloads = False

    setup_logging(
        level=log_level,
        log_file=args.log_file,
        debug_payloads=debug_payloads,
    )

    settings = get_settings(args.config)
    logger.info(f"Decoding {args.kind} payloads from {len(args.files)} file(s)")

    start_time = time.time()
    decoded = failed = unreadable = 0

    try:
        for path in args.files:
            with logger.block(path) as block:
                try:
                    stats = decode_file(path, args.kind, settings)
                except (
                    OSError,
                    UnicodeDecodeError,
                    json.JSONDecodeError,
                    PayloadTooLarge,
                ) as e:
                    logger.unreadable(path, str(e))
                    block.skip(str(e))
                    unreadable += 1
                    continue

                decoded += stats.decoded
                failed += stats.failed
                if stats.total == 0:
                    block.empty()
                    continue
                block.field("payloads", stats.total)
                block.result(
                    f"decoded {stats.decoded:,} of {stats.total:,} payloads",
                    success=stats.failed == 0,
                )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)

    logger.summary(
        files=len(args.files),
        decoded=decoded,
        failed=failed,
        unreadable=unreadable,
        elapsed=time.time() - start_time,
    )

    if failed or unreadable:
        sys.exit(1)
    logger.success("All payloads decoded")


if __name__ == "__main__":
    main()
