"""Payload intake for the Discord data model.

This package reads raw Discord API JSON from files, decodes each payload
with the decoder registered for its kind, and reports the payloads that
failed without stopping the batch.

Usage:
    python -m discord_models.ingest message messages.json   # Decode messages
    python -m discord_models.ingest ready ready.json -v     # Show more details
    python -m discord_models.ingest --list-kinds            # Show payload kinds
"""
