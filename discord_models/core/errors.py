"""Decode error taxonomy.

Every decoder fails with a subclass of DecodeError. Errors carry enough
context to pinpoint the fault in the payload:

- MissingField: a required key is absent
- TypeMismatch: a value has the wrong shape
- InvalidEnumValue: a token or ordinal outside an enum's fixed set
- NestedDecodeFailure: a nested record or collection failed; wraps the
  inner error so the full field path can be recovered
"""

from __future__ import annotations

from typing import Any


class DecodeError(Exception):
    """Base class for all payload decode failures."""

    def __init__(self, key: str | None = None) -> None:
        self.key = key
        super().__init__()

    def __str__(self) -> str:
        return self.describe()

    def describe(self) -> str:
        return "decode failed"


class MissingField(DecodeError):
    """Raised when a required field is absent from a map."""

    def __init__(self, key: str) -> None:
        super().__init__(key)

    def describe(self) -> str:
        return f"missing field {self.key!r}"


class TypeMismatch(DecodeError):
    """Raised when a present value is not of the expected shape."""

    def __init__(self, expected: str, value: Any, key: str | None = None) -> None:
        self.expected = expected
        self.value = value
        super().__init__(key)

    def describe(self) -> str:
        where = f" for field {self.key!r}" if self.key is not None else ""
        return (
            f"expected {self.expected}{where}, "
            f"got {type(self.value).__name__} {self.value!r}"
        )


class InvalidEnumValue(DecodeError):
    """Raised when a token or ordinal is not a member of a closed enum."""

    def __init__(self, kind: str, value: Any, key: str | None = None) -> None:
        self.kind = kind
        self.value = value
        super().__init__(key)

    def describe(self) -> str:
        where = f" for field {self.key!r}" if self.key is not None else ""
        return f"invalid {self.kind} value {self.value!r}{where}"


class NestedDecodeFailure(DecodeError):
    """Raised when a nested record or collection under a field fails."""

    def __init__(self, field_name: str, inner: DecodeError) -> None:
        self.field_name = field_name
        self.inner = inner
        super().__init__(field_name)

    @property
    def path(self) -> list[str]:
        """Field names from the outermost record down to the faulty key."""
        path = [self.field_name]
        inner = self.inner
        while isinstance(inner, NestedDecodeFailure):
            path.append(inner.field_name)
            inner = inner.inner
        if inner.key is not None:
            path.append(inner.key)
        return path

    @property
    def root_cause(self) -> DecodeError:
        """The innermost, non-wrapper error."""
        inner = self.inner
        while isinstance(inner, NestedDecodeFailure):
            inner = inner.inner
        return inner

    def describe(self) -> str:
        return f"{'.'.join(self.path)}: {self.root_cause.describe()}"
