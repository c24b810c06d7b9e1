"""Primitive value accessors.

Each accessor checks one shape of the dynamic value tree and either returns
the value as a native Python type or raises TypeMismatch / MissingField.
"""

from __future__ import annotations

from typing import Any

from discord_models.core.errors import MissingField, TypeMismatch
from discord_models.utils.ids import U64_MAX, parse_snowflake

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def get_field(container: dict[str, Any], key: str) -> Any:
    """Remove and return the value at `key`, consuming it.

    Raises:
        MissingField: If `key` is not present.
    """
    try:
        return container.pop(key)
    except KeyError:
        raise MissingField(key) from None


def expect_map(value: Any) -> dict[str, Any]:
    """Entry point of every record decoder.

    Returns a shallow copy, so fields consumed by the decoder are never
    removed from the caller's payload. Unrecognized keys left in the copy
    are ignored.
    """
    if not isinstance(value, dict):
        raise TypeMismatch("map", value)
    return dict(value)


def expect_sequence(value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise TypeMismatch("sequence", value)
    return value


def expect_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeMismatch("string", value)
    return value


def expect_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatch("bool", value)
    return value


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid integer on the wire
    return isinstance(value, int) and not isinstance(value, bool)


def expect_u64(value: Any) -> int:
    if not _is_integer(value) or not 0 <= value <= U64_MAX:
        raise TypeMismatch("u64", value)
    return value


def expect_i64(value: Any) -> int:
    if not _is_integer(value) or not I64_MIN <= value <= I64_MAX:
        raise TypeMismatch("i64", value)
    return value


def expect_snowflake(value: Any) -> int:
    """Accept a snowflake as a numeric literal or a numeric string."""
    number = parse_snowflake(value)
    if number is None:
        raise TypeMismatch("snowflake", value)
    return number


def expect_bitfield(value: Any) -> int:
    """Permission bitfields are sent as integers or as numeric strings."""
    number = parse_snowflake(value)
    if number is None:
        raise TypeMismatch("bitfield", value)
    return number


def expect_discriminator(value: Any) -> int:
    """Parse a user discriminator ("0001" or 1) into its integer form."""
    number = parse_snowflake(value)
    if number is None or number > 9999:
        raise TypeMismatch("discriminator", value)
    return number
