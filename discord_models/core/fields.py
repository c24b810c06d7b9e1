"""Required and optional field extraction for record decoders."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from discord_models.core.accessors import get_field
from discord_models.core.errors import DecodeError, NestedDecodeFailure

T = TypeVar("T")
D = TypeVar("D")


def _apply(key: str, value: Any, decoder: Callable[[Any], T]) -> T:
    try:
        return decoder(value)
    except DecodeError as exc:
        if exc.key is None:
            # Leaf failure on this field's own value
            exc.key = key
            raise
        raise NestedDecodeFailure(key, exc) from exc


def required(container: dict[str, Any], key: str, decoder: Callable[[Any], T]) -> T:
    """Consume a required field and decode it.

    Raises:
        MissingField: If `key` is absent.
        DecodeError: If the value does not decode.
    """
    return _apply(key, get_field(container, key), decoder)


def decode_optional(
    container: dict[str, Any],
    key: str,
    decoder: Callable[[Any], T],
    default: D = None,
) -> T | D:
    """Consume an optional field.

    An absent key (or an explicit null) yields `default`. A present value
    that fails to decode is still an error.
    """
    if key not in container:
        return default
    value = container.pop(key)
    if value is None:
        return default
    return _apply(key, value, decoder)
