# topmark:header:start
#
#   project      : IndexEnc
#   file         : test_binary.py
#   file_relpath : tests/encoder/test_binary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the URL-safe base64 helpers."""

from __future__ import annotations

from array import array

import pytest

from indexenc.core.errors import EncoderWriteError
from indexenc.encoder.binary import as_octets, encode_into, encoded_length, max_encoded_length
from tests.conftest import mark_encoder, parametrize


@mark_encoder
@parametrize(
    "n, unpadded, padded",
    [(0, 0, 0), (1, 2, 4), (2, 3, 4), (3, 4, 4), (4, 6, 8), (5, 7, 8), (6, 8, 8)],
)
def test_encoded_length(n: int, unpadded: int, padded: int) -> None:
    assert encoded_length(n) == unpadded
    assert encoded_length(n, pad=True) == padded
    assert max_encoded_length(n) == padded


@mark_encoder
def test_encoded_length_rejects_negative() -> None:
    with pytest.raises(ValueError):
        encoded_length(-1)


@mark_encoder
def test_encode_into_writes_at_offset() -> None:
    buffer = bytearray(b"ab" + bytes(max_encoded_length(3)))
    written: int = encode_into(buffer, 2, b"\xfb\xef\xbe")
    assert written == 4
    assert bytes(buffer[: 2 + written]) == b"ab----"


@mark_encoder
def test_encode_into_pads_on_request() -> None:
    buffer = bytearray(max_encoded_length(1))
    written: int = encode_into(buffer, 0, b"\x00", pad=True)
    assert bytes(buffer[:written]) == b"AA=="


@mark_encoder
def test_encode_into_region_too_small() -> None:
    buffer = bytearray(2)
    with pytest.raises(EncoderWriteError):
        encode_into(buffer, 0, b"\x00\x01\x02")


@mark_encoder
def test_as_octets_flattens_wide_views() -> None:
    data = array("h", [1, -1])
    flat = as_octets(memoryview(data))
    assert len(flat) == 4
    assert bytes(flat) == data.tobytes()


@mark_encoder
def test_as_octets_keeps_byte_views() -> None:
    view = memoryview(b"abc")
    assert as_octets(view) is view


@mark_encoder
def test_encode_into_sizes_wide_view_in_bytes() -> None:
    view = memoryview(array("i", [7, 8, 9]))
    buffer = bytearray(max_encoded_length(view.nbytes))
    written: int = encode_into(buffer, 0, view)
    assert written == encoded_length(view.nbytes)
