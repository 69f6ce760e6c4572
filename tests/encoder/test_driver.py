# topmark:header:start
#
#   project      : IndexEnc
#   file         : test_driver.py
#   file_relpath : tests/encoder/test_driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `encode_value`: mapping Python values onto visitor calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

import pytest

from indexenc.core.errors import UnsupportedShapeError
from indexenc.core.shapes import Shape
from indexenc.encoder.dispatch import IndexedEncoder
from indexenc.encoder.driver import encode_value, record_fields
from indexenc.encoder.values import Char, Record
from tests.conftest import mark_encoder, parametrize

if TYPE_CHECKING:
    from indexenc.encoder.values import ValueVisitor


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Level:
    level_id: int = field(metadata={"indexenc": {"rename": "k1"}})
    title: str = "intro"
    cache: bytes = field(default=b"", metadata={"indexenc": {"skip": True}})


@dataclass
class Marker:
    pass


@dataclass
class Profile:
    name: str
    nickname: str | None
    origin: Point


class Pair(NamedTuple):
    left: int
    right: str


class Color(Enum):
    RED = 1
    GREEN = 2


class Meters:
    """A hand-written `Encodable` that serializes as a single float."""

    def __init__(self, value: float) -> None:
        self.value = value

    def encode_to(self, visitor: ValueVisitor) -> None:
        visitor.encode_float(self.value)


def _encode(value: object, *, delimiter: str = ",", map_like: bool = False) -> str:
    enc = IndexedEncoder(delimiter, map_like=map_like)
    encode_value(value, enc)
    return enc.finish()


@mark_encoder
@parametrize(
    "value, expected",
    [
        (42, "42"),
        (True, "1"),
        (False, "0"),
        (2.5, "2.5"),
        ("text", "text"),
        (Char("c"), "c"),
        (b"\x00\x01\x02", "AAEC"),
        (bytearray(b"\x00\x01\x02"), "AAEC"),
        (memoryview(b"\x00\x01\x02"), "AAEC"),
    ],
)
def test_top_level_primitives(value: object, expected: str) -> None:
    assert _encode(value) == expected


@mark_encoder
def test_top_level_none_is_a_bare_delimiter() -> None:
    assert _encode(None) == ","


@mark_encoder
def test_dataclass_record() -> None:
    assert _encode(Point(1, 2)) == "1,2"
    assert _encode(Point(1, 2), delimiter=":", map_like=True) == "x:1:y:2"


@mark_encoder
def test_dataclass_field_metadata_rename_and_skip() -> None:
    level = Level(level_id=7, cache=b"ignored")
    assert _encode(level) == "7,intro"
    assert _encode(level, map_like=True) == "k1,7,title,intro"


@mark_encoder
def test_nested_dataclass_with_optional() -> None:
    assert _encode(Profile("ann", None, Point(3, 4))) == "ann,,3,4"
    assert _encode(Profile("ann", "a", Point(3, 4))) == "ann,a,3,4"


@mark_encoder
def test_named_tuple_is_a_record() -> None:
    assert _encode(Pair(1, "r")) == "1,r"
    assert _encode(Pair(1, "r"), delimiter="=", map_like=True) == "left=1=right=r"


@mark_encoder
def test_record_from_mapping_keeps_key_order() -> None:
    rec = Record.from_mapping({"inner": {"p": 1, "q": 2}, "r": 3})
    assert _encode(rec) == "1,2,3"


@mark_encoder
def test_absent_then_value_in_record() -> None:
    assert _encode(Record.from_mapping({"a": None, "b": 5})) == ",5"


@mark_encoder
def test_empty_record_encodes_to_empty_string() -> None:
    assert _encode(Record("Empty")) == ""


@mark_encoder
def test_encodable_protocol_is_honored() -> None:
    assert _encode(Record("R", [("m", Meters(1.25)), ("n", 2)])) == "1.25,2"


@mark_encoder
@parametrize(
    "value, shape",
    [
        ([1, 2, 3], Shape.SEQ),
        ({1, 2}, Shape.SEQ),
        ((x for x in range(2)), Shape.SEQ),
        ((1, 2), Shape.TUPLE),
        ((), Shape.UNIT),
        ({"a": 1}, Shape.MAP),
        (Color.GREEN, Shape.UNIT_VARIANT),
        (Marker(), Shape.UNIT_STRUCT),
        (object(), Shape.DISPLAY),
    ],
    ids=["list", "set", "generator", "tuple", "unit", "dict", "enum", "unit-struct", "object"],
)
def test_unsupported_values(value: object, shape: Shape) -> None:
    enc = IndexedEncoder(",")
    with pytest.raises(UnsupportedShapeError) as excinfo:
        encode_value(value, enc)
    assert excinfo.value.shape is shape
    assert enc.getvalue() == ""


@mark_encoder
def test_unsupported_field_keeps_previous_segments() -> None:
    enc = IndexedEncoder(",")
    with pytest.raises(UnsupportedShapeError):
        encode_value(Record("R", [("ok", 1), ("bad", [1])]), enc)
    # The pass failed; partial output is whatever was appended before the error.
    assert enc.getvalue() == "1"


@mark_encoder
def test_record_fields_helper() -> None:
    assert record_fields(Point(1, 2)) == [("x", 1), ("y", 2)]
    assert record_fields(Pair(1, "r")) == [("left", 1), ("right", "r")]
    assert record_fields(Record("R", [("a", 1)])) == [("a", 1)]
    assert record_fields((1, 2)) is None
    assert record_fields(Point) is None
    assert record_fields({"a": 1}) is None
