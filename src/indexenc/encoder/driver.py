# topmark:header:start
#
#   project      : IndexEnc
#   file         : driver.py
#   file_relpath : src/indexenc/encoder/driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Traversal driver for ordinary Python values.

`encode_value` walks a Python value and reports it to a `ValueVisitor`,
calling exactly one entry point per leaf and the record protocol once per
field. It is the only place that looks at Python types; the encoder itself
reacts to the shapes it is told about.

Shape mapping:

| Python value                           | Visitor call                       |
|----------------------------------------|------------------------------------|
| ``None``                               | ``encode_none``                    |
| `Encodable`                            | ``value.encode_to(visitor)``       |
| ``Enum`` member                        | ``encode_unit_variant``            |
| ``bool``                               | ``encode_bool``                    |
| ``int``                                | ``encode_int``                     |
| ``float``                              | ``encode_float``                   |
| `Char`                                 | ``encode_char``                    |
| ``str``                                | ``encode_str``                     |
| ``bytes`` / ``bytearray`` / ``memoryview`` | ``encode_bytes``               |
| `Record`, dataclass, named tuple       | ``begin_record`` + fields + ``end``|
| dataclass without fields               | ``encode_unit_struct``             |
| ``()``                                 | ``encode_unit``                    |
| other ``tuple``                        | ``begin_tuple``                    |
| ``Mapping``                            | ``begin_map``                      |
| other iterables                        | ``begin_seq``                      |
| anything else                          | ``collect_str``                    |

Dataclass fields can be renamed or skipped through field metadata::

    @dataclass
    class Level:
        level_id: int = field(metadata={"indexenc": {"rename": "k1"}})
        cache: bytes = field(default=b"", metadata={"indexenc": {"skip": True}})
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from indexenc.encoder.values import Char, Encodable, Record

if TYPE_CHECKING:
    from indexenc.encoder.values import RecordVisitor, ValueVisitor

FIELD_METADATA_KEY: Final[str] = "indexenc"


def _dataclass_fields(value: Any) -> list[tuple[str, object]]:
    pairs: list[tuple[str, object]] = []
    for f in dataclasses.fields(value):
        options: Mapping[str, Any] = f.metadata.get(FIELD_METADATA_KEY, {})
        if options.get("skip", False):
            continue
        name: str = str(options.get("rename", f.name))
        pairs.append((name, getattr(value, f.name)))
    return pairs


def record_fields(value: object) -> list[tuple[str, object]] | None:
    """Return the named fields of a record-like value, or None if it is not one.

    Args:
        value (object): A `Record`, a dataclass instance or a named tuple.

    Returns:
        list[tuple[str, object]] | None: ``(name, value)`` pairs in declaration
        order, or None if ``value`` is not record-like.
    """
    if isinstance(value, Record):
        return list(value.fields)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _dataclass_fields(value)
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        names: tuple[str, ...] = value._fields  # pyright: ignore[reportAttributeAccessIssue]
        return list(zip(names, value, strict=True))
    return None


def _record_name(value: object) -> str:
    if isinstance(value, Record):
        return value.name
    return type(value).__name__


def _feed(rv: RecordVisitor, pairs: Iterable[tuple[str, object]]) -> None:
    for name, item in pairs:
        rv.field(name, item)
    rv.end()


def encode_value(value: object, visitor: ValueVisitor) -> None:
    """Report ``value`` to ``visitor``.

    Args:
        value (object): The value to encode.
        visitor (ValueVisitor): Receiver of the shape calls.
    """
    if value is None:
        visitor.encode_none()
        return
    if isinstance(value, Encodable):
        value.encode_to(visitor)
        return
    if isinstance(value, Enum):
        members: list[Enum] = list(type(value))
        visitor.encode_unit_variant(type(value).__name__, members.index(value), value.name)
        return
    if isinstance(value, bool):
        visitor.encode_bool(value)
        return
    if isinstance(value, int):
        visitor.encode_int(value)
        return
    if isinstance(value, float):
        visitor.encode_float(value)
        return
    if isinstance(value, Char):
        visitor.encode_char(value.value)
        return
    if isinstance(value, str):
        visitor.encode_str(value)
        return
    if isinstance(value, (bytes, bytearray, memoryview)):
        visitor.encode_bytes(value)
        return

    pairs: list[tuple[str, object]] | None = record_fields(value)
    if pairs is not None:
        if not pairs and not isinstance(value, Record):
            visitor.encode_unit_struct(_record_name(value))
            return
        _feed(visitor.begin_record(_record_name(value), len(pairs)), pairs)
        return

    if isinstance(value, tuple):
        if not value:
            visitor.encode_unit()
            return
        _feed(visitor.begin_tuple(len(value)), ((str(i), v) for i, v in enumerate(value)))
        return
    if isinstance(value, Mapping):
        _feed(visitor.begin_map(len(value)), ((str(k), v) for k, v in value.items()))
        return
    if isinstance(value, Iterable):
        length: int | None = len(value) if hasattr(value, "__len__") else None  # type: ignore[arg-type]
        _feed(visitor.begin_seq(length), ((str(i), v) for i, v in enumerate(value)))
        return

    visitor.collect_str(value)
