"""Generic decoding primitives shared by every record decoder.

Dependency order, leaves first:
    accessors -> fields -> collections -> enums

Usage:
    def decode_thing(value: Any) -> Thing:
        data = expect_map(value)
        return Thing(
            id=required(data, "id", UserId.decode),
            name=decode_optional(data, "name", expect_string),
        )
"""

from discord_models.core.accessors import (
    expect_bitfield,
    expect_bool,
    expect_discriminator,
    expect_i64,
    expect_map,
    expect_sequence,
    expect_snowflake,
    expect_string,
    expect_u64,
    get_field,
)
from discord_models.core.collections import (
    decode_id_keyed_map,
    decode_keyed_object,
    decode_sequence,
    keyed_by,
    sequence_of,
)
from discord_models.core.enums import WireEnum
from discord_models.core.errors import (
    DecodeError,
    InvalidEnumValue,
    MissingField,
    NestedDecodeFailure,
    TypeMismatch,
)
from discord_models.core.fields import decode_optional, required

__all__ = [
    "DecodeError",
    "InvalidEnumValue",
    "MissingField",
    "NestedDecodeFailure",
    "TypeMismatch",
    "WireEnum",
    "decode_id_keyed_map",
    "decode_keyed_object",
    "decode_optional",
    "decode_sequence",
    "expect_bitfield",
    "expect_bool",
    "expect_discriminator",
    "expect_i64",
    "expect_map",
    "expect_sequence",
    "expect_snowflake",
    "expect_string",
    "expect_u64",
    "get_field",
    "keyed_by",
    "required",
    "sequence_of",
]
