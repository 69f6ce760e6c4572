# topmark:header:start
#
#   project      : IndexEnc
#   file         : values.py
#   file_relpath : src/indexenc/encoder/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value-side types of the encoding protocol.

The encoder never inspects a value's type system; values describe themselves
to a `ValueVisitor` by calling exactly one entry point per shape. This module
defines:

- `ValueVisitor` / `RecordVisitor`: the capability interface every encoder
  implements (see `indexenc.encoder.dispatch.IndexedEncoder`).
- `Encodable`: the interface of values that drive the visitor themselves.
- `Char`: a single character (Python has no distinct character type).
- `Record`: a generic record with named fields in declaration order, for
  callers whose record types are only known at runtime (e.g. parsed TOML).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class RecordVisitor(Protocol):
    """Per-record half of the visitor protocol."""

    def field(self, name: str, value: object) -> None:
        """Encode one named field."""
        ...

    def end(self) -> None:
        """Signal that all fields of the record were visited."""
        ...


class ValueVisitor(Protocol):
    """Capability interface: accept one of bool | int | float | char | str | bytes |
    optional | record-of(name, value)*.

    Composite shapes the format cannot represent have entry points too, so a
    value can report them and be rejected with the shape's name.
    """

    def encode_bool(self, value: bool) -> None: ...

    def encode_int(self, value: int) -> None: ...

    def encode_float(self, value: float) -> None: ...

    def encode_char(self, value: str) -> None: ...

    def encode_str(self, value: str) -> None: ...

    def encode_bytes(self, value: bytes | bytearray | memoryview) -> None: ...

    def encode_none(self) -> None: ...

    def encode_some(self, value: object) -> None: ...

    def begin_record(self, name: str, length: int) -> RecordVisitor: ...

    def encode_unit(self) -> None: ...

    def encode_unit_struct(self, name: str) -> None: ...

    def encode_unit_variant(self, name: str, index: int, variant: str) -> None: ...

    def encode_newtype_struct(self, name: str, value: object) -> None: ...

    def encode_newtype_variant(
        self, name: str, index: int, variant: str, value: object
    ) -> None: ...

    def begin_seq(self, length: int | None) -> RecordVisitor: ...

    def begin_tuple(self, length: int) -> RecordVisitor: ...

    def begin_tuple_struct(self, name: str, length: int) -> RecordVisitor: ...

    def begin_tuple_variant(
        self, name: str, index: int, variant: str, length: int
    ) -> RecordVisitor: ...

    def begin_map(self, length: int | None) -> RecordVisitor: ...

    def begin_struct_variant(
        self, name: str, index: int, variant: str, length: int
    ) -> RecordVisitor: ...

    def collect_str(self, value: object) -> None: ...


@runtime_checkable
class Encodable(Protocol):
    """A value that reports its own shape to a visitor.

    Example:
        ```python
        class Point:
            def __init__(self, x: int, y: int) -> None:
                self.x, self.y = x, y

            def encode_to(self, visitor: ValueVisitor) -> None:
                rec = visitor.begin_record("Point", 2)
                rec.field("x", self.x)
                rec.field("y", self.y)
                rec.end()
        ```
    """

    def encode_to(self, visitor: ValueVisitor) -> None:
        """Describe this value to `visitor`."""
        ...


@dataclass(frozen=True, slots=True)
class Char:
    """A single Unicode character.

    Attributes:
        value (str): A string of length 1.

    Raises:
        ValueError: If `value` is not exactly one character long.
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char expects exactly one character, got {self.value!r}")

    def __str__(self) -> str:
        return self.value


class Record:
    """A record with named fields, kept in declaration order.

    Args:
        name (str): The record type name (informational; not encoded).
        fields (Iterable[tuple[str, object]]): ``(name, value)`` pairs in order.

    Field names are not required to be unique; the encoder emits them exactly
    as given.
    """

    __slots__ = ("name", "_fields")

    def __init__(self, name: str, fields: Iterable[tuple[str, object]] = ()) -> None:
        self.name: str = name
        self._fields: tuple[tuple[str, object], ...] = tuple(fields)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, object],
        name: str = "record",
        *,
        nested: bool = True,
    ) -> Record:
        """Build a record from a mapping, keeping the mapping's key order.

        Args:
            mapping (Mapping[str, object]): Source of field names and values.
            name (str): Record type name.
            nested (bool): If True, values that are themselves mappings become
                nested `Record` instances named after their key.

        Returns:
            Record: The new record.
        """
        fields: list[tuple[str, object]] = []
        for key, value in mapping.items():
            if nested and isinstance(value, Mapping):
                value = cls.from_mapping(value, name=str(key), nested=True)
            fields.append((str(key), value))
        return cls(name, fields)

    @property
    def fields(self) -> tuple[tuple[str, object], ...]:
        """The ``(name, value)`` pairs in declaration order."""
        return self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[tuple[str, object]]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.name == other.name and self._fields == other._fields

    def __hash__(self) -> int:
        return hash((self.name, self._fields))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._fields)
        return f"Record({self.name!r}, {inner})"
