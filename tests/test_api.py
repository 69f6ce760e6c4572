# topmark:header:start
#
#   project      : IndexEnc
#   file         : test_api.py
#   file_relpath : tests/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API (`indexenc.to_string`, `indexenc.new_encoder`)."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

import indexenc
from indexenc import (
    ConfigError,
    IndexedEncoder,
    Record,
    UnsupportedShapeError,
    new_encoder,
    to_string,
)
from tests.conftest import make_config


@dataclass
class Inner:
    p: int
    q: int


@dataclass
class Outer:
    inner: Inner
    r: int


def test_single_integer() -> None:
    assert to_string(42) == "42"


def test_booleans() -> None:
    assert to_string(True) == "1"
    assert to_string(False) == "0"


def test_absent_leading_field() -> None:
    assert to_string(Record.from_mapping({"a": None, "b": 5})) == ",5"


def test_map_like_with_colon() -> None:
    value = Record.from_mapping({"x": 1, "y": 2})
    assert to_string(value, delimiter=":", map_like=True) == "x:1:y:2"


def test_bytes_are_four_url_safe_characters() -> None:
    out: str = to_string(bytes([0, 1, 2]))
    assert len(out) == 4
    assert "+" not in out and "/" not in out


@pytest.mark.parametrize("value", [[1, 2], {"k": 1}, ()])
def test_unsupported_top_level_values(value: object) -> None:
    with pytest.raises(UnsupportedShapeError):
        to_string(value)


def test_nested_records_are_flat() -> None:
    assert to_string(Outer(Inner(1, 2), 3)) == "1,2,3"


def test_empty_record() -> None:
    assert to_string(Record("Empty")) == ""


def test_config_is_used_and_keywords_win() -> None:
    cfg = make_config(delimiter=";", map_like=True)
    assert to_string(Inner(1, 2), config=cfg) == "p;1;q;2"
    assert to_string(Inner(1, 2), config=cfg, map_like=False) == "1;2"
    assert to_string(Inner(1, 2), config=cfg, delimiter="|") == "p|1|q|2"


def test_empty_delimiter_keyword_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        to_string(1, delimiter="")


def test_new_encoder_uses_config() -> None:
    enc: IndexedEncoder = new_encoder(make_config(delimiter="/", pad_bytes=True))
    assert enc.delimiter == "/"
    assert enc.pad_bytes
    enc.encode_bytes(b"\x00")
    enc.encode_int(1)
    assert enc.finish() == "AA==/1"


def test_new_encoder_defaults() -> None:
    enc: IndexedEncoder = new_encoder()
    assert enc.delimiter == ","
    assert not enc.map_like
    assert enc.finish() == ""


def test_public_names() -> None:
    for name in indexenc.__all__:
        assert hasattr(indexenc, name), name


def test_list_valued_field_aborts_with_seq_shape() -> None:
    with pytest.raises(UnsupportedShapeError) as excinfo:
        to_string(Record.from_mapping({"id": 1, "tags": ["a", "b"]}))
    assert excinfo.value.shape.key == "seq"
