"""Collection decoders: ordered sequences and id-keyed maps."""

from __future__ import annotations

from functools import partial
from operator import attrgetter
from typing import Any, Callable, Hashable, TypeVar

from discord_models.core.accessors import expect_map, expect_sequence

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def decode_sequence(value: Any, element_decoder: Callable[[Any], T]) -> list[T]:
    """Decode every element of a sequence, in order.

    The first failing element's error propagates unchanged; no index is
    added to it.
    """
    return [element_decoder(element) for element in expect_sequence(value)]


def decode_id_keyed_map(
    value: Any,
    record_decoder: Callable[[Any], T],
    id_field: str,
) -> dict[Any, T]:
    """Decode a sequence of records and key them by their own identifier.

    Args:
        value: Sequence of record payloads
        record_decoder: Decoder applied to every element
        id_field: Attribute path of the key on the decoded record,
            e.g. "id" or "user.id"

    Returns:
        Mapping of identifier to record. If an identifier repeats, the
        last record wins.
    """
    key_of = attrgetter(id_field)
    records: dict[Any, T] = {}
    for record in decode_sequence(value, record_decoder):
        records[key_of(record)] = record
    return records


def decode_keyed_object(
    value: Any,
    key_decoder: Callable[[Any], K],
    value_decoder: Callable[[Any], T],
) -> dict[K, T]:
    """Decode a JSON object whose keys are themselves encoded values."""
    return {
        key_decoder(key): value_decoder(item)
        for key, item in expect_map(value).items()
    }


def sequence_of(element_decoder: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """Build a field decoder for a sequence of `element_decoder` values."""
    return partial(decode_sequence, element_decoder=element_decoder)


def keyed_by(
    record_decoder: Callable[[Any], T], id_field: str = "id"
) -> Callable[[Any], dict[Any, T]]:
    """Build a field decoder for an id-keyed map of records."""
    return partial(
        decode_id_keyed_map, record_decoder=record_decoder, id_field=id_field
    )
