# discord_models/utils/ids.py
from __future__ import annotations

from typing import Any

U64_MAX = (1 << 64) - 1


def parse_snowflake(value: Any) -> int | None:
    """Parse a snowflake given as an int or a string of decimal digits.

    Returns None when the value is not a valid unsigned 64-bit snowflake.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        number = int(value)
    else:
        return None
    if 0 <= number <= U64_MAX:
        return number
    return None
