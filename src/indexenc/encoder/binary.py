# topmark:header:start
#
#   project      : IndexEnc
#   file         : binary.py
#   file_relpath : src/indexenc/encoder/binary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""URL-safe base64 for byte blobs.

Byte sequences are emitted with the URL-safe alphabet (``-`` and ``_`` in
place of ``+`` and ``/``), so the encoded text never collides with common
delimiters and survives query strings unchanged. Padding is dropped by
default, which makes the output exactly ``ceil(n * 4 / 3)`` characters long.

The writer works on a caller-owned ``bytearray``: the caller reserves
`max_encoded_length` bytes, `encode_into` fills the front of that region and
reports how much it wrote, and the caller trims to that length.
"""

from __future__ import annotations

import base64
import binascii

from indexenc.core.errors import EncoderWriteError

PAD_CHAR: bytes = b"="


def as_octets(data: bytes | bytearray | memoryview) -> bytes | bytearray | memoryview:
    """Return ``data`` as a flat sequence of single bytes.

    A ``memoryview`` over wider items (e.g. an ``array("i")``) or a
    multi-dimensional or non-contiguous view is copied to ``bytes`` so that
    ``len()`` counts bytes, not items.
    """
    if isinstance(data, memoryview) and (
        data.format not in ("B", "b", "c") or data.ndim != 1 or not data.c_contiguous
    ):
        return data.tobytes()
    return data


def encoded_length(n: int, *, pad: bool = False) -> int:
    """Return the encoded length of ``n`` input bytes.

    Args:
        n (int): Number of input bytes.
        pad (bool): Whether ``=`` padding is kept.

    Returns:
        int: ``4 * ceil(n / 3)`` when padded, ``ceil(n * 4 / 3)`` otherwise.
    """
    if n < 0:
        raise ValueError(f"Negative input length: {n}")
    if pad:
        return 4 * ((n + 2) // 3)
    return (n * 4 + 2) // 3


def max_encoded_length(n: int) -> int:
    """Upper bound of the encoded length for ``n`` bytes (padded form)."""
    return encoded_length(n, pad=True)


def encode_into(
    buffer: bytearray,
    offset: int,
    data: bytes | bytearray | memoryview,
    *,
    pad: bool = False,
) -> int:
    """Write the URL-safe base64 form of ``data`` into ``buffer`` at ``offset``.

    The region ``buffer[offset:offset + max_encoded_length(len(data))]`` must
    already be reserved by the caller.

    Args:
        buffer (bytearray): Destination buffer.
        offset (int): Start of the reserved region.
        data (bytes | bytearray | memoryview): Bytes to encode.
        pad (bool): Keep ``=`` padding.

    Returns:
        int: Number of bytes written at ``offset``.

    Raises:
        EncoderWriteError: If the reserved region is too small or the
            conversion fails.
    """
    data = as_octets(data)
    try:
        encoded: bytes = base64.urlsafe_b64encode(data)
    except (binascii.Error, TypeError, MemoryError) as exc:
        raise EncoderWriteError(f"base64 conversion failed: {exc}") from exc

    if not pad:
        encoded = encoded.rstrip(PAD_CHAR)

    written: int = len(encoded)
    if offset + written > len(buffer):
        raise EncoderWriteError(
            f"Reserved region too small: need {written} bytes at offset {offset}, "
            f"buffer holds {len(buffer)}"
        )
    buffer[offset : offset + written] = encoded
    return written
