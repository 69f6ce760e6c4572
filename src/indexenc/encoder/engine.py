# topmark:header:start
#
#   project      : IndexEnc
#   file         : engine.py
#   file_relpath : src/indexenc/encoder/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Append engine: the output buffer and its delimiter discipline.

`AppendEngine` owns a single growable ``bytearray`` plus a write cursor. Every
append writes the delimiter first (unless it is the very first append), then
its payload. Bytes past the cursor are scratch space: a capacity hint
pre-sizes the array, and the byte-blob writer reserves a region there and
trims back to what it actually wrote.

Invariants:
    - ``buffer[:cursor]`` is valid UTF-8 whenever control returns to the
      caller. Text is strictly encoded before the buffer is touched, and a
      failed append rewinds the cursor to where it started.
    - ``is_start`` is True until the first integer/float/text/bytes append
      completes. `append_absent` neither reads nor clears it, so a leading
      absent value still writes a delimiter (``{a: None, b: 5}`` with ``","``
      encodes to ``",5"``). This keeps a leading absent field distinguishable
      from an empty record.

Number formats:
    Integers are written in plain decimal. Floats use Python's ``repr``, the
    shortest round-tripping form; exponents carry an explicit sign
    (``1e+16``, not ``1e16``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexenc.core.errors import (
    EncoderStateError,
    EncoderWriteError,
    InvalidTextError,
)
from indexenc.encoder.binary import as_octets, encode_into, max_encoded_length

if TYPE_CHECKING:
    from collections.abc import Callable


def _encode_text(text: str, what: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidTextError(f"{what} is not valid Unicode text: {exc}") from exc


class AppendEngine:
    """Output buffer with primitive append operations.

    Args:
        delimiter (str): Separator written between two appended segments.
        map_like (bool): Whether record fields are prefixed by their name
            (consulted by the record protocol, not by the engine).
        capacity (int | None): Optional number of bytes to pre-allocate.
        pad_bytes (bool): Keep ``=`` padding when encoding byte blobs.

    Raises:
        InvalidTextError: If ``delimiter`` cannot be encoded as UTF-8.
        ValueError: If ``capacity`` is negative.
    """

    __slots__ = (
        "_delimiter",
        "_map_like",
        "_pad_bytes",
        "_buffer",
        "_length",
        "_is_start",
        "_open_records",
        "_finished",
    )

    def __init__(
        self,
        delimiter: str = ",",
        *,
        map_like: bool = False,
        capacity: int | None = None,
        pad_bytes: bool = False,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._delimiter: bytes = _encode_text(delimiter, "Delimiter")
        self._map_like: bool = map_like
        self._pad_bytes: bool = pad_bytes
        self._buffer: bytearray = bytearray(capacity or 0)
        self._length: int = 0
        self._is_start: bool = True
        self._open_records: int = 0
        self._finished: bool = False

    # --- Introspection ---

    @property
    def delimiter(self) -> str:
        return self._delimiter.decode("utf-8")

    @property
    def map_like(self) -> bool:
        return self._map_like

    @property
    def pad_bytes(self) -> bool:
        return self._pad_bytes

    @property
    def is_start(self) -> bool:
        """True until the first non-absent append completed."""
        return self._is_start

    @property
    def finished(self) -> bool:
        return self._finished

    def getvalue(self) -> str:
        """Return the text accumulated so far without consuming the encoder."""
        return self._buffer[: self._length].decode("utf-8")

    def __len__(self) -> int:
        """Number of bytes written so far."""
        return self._length

    # --- Low-level writes ---

    def _ensure_live(self) -> None:
        if self._finished:
            raise EncoderStateError("Encoder was already finished; create a new one")

    def _write(self, data: bytes) -> None:
        end: int = self._length + len(data)
        try:
            self._buffer[self._length : end] = data
        except (MemoryError, BufferError) as exc:
            raise EncoderWriteError(f"Cannot grow output buffer: {exc}") from exc
        self._length = end

    def _write_delimiter(self) -> None:
        self._write(self._delimiter)

    def _segment(self, write_payload: Callable[[], None]) -> None:
        """Write one segment: delimiter (unless first), then the payload.

        On any failure the cursor is rewound and ``is_start`` is untouched.
        """
        self._ensure_live()
        mark: int = self._length
        try:
            if not self._is_start:
                self._write_delimiter()
            write_payload()
        except Exception:
            self._length = mark
            raise
        self._is_start = False

    # --- Primitive appends ---

    def append_integer(self, value: int) -> None:
        """Append the decimal form of an integer.

        Args:
            value (int): Any Python int (booleans are rejected).

        Raises:
            TypeError: If ``value`` is not an int or is a bool.
            EncoderWriteError: If the decimal conversion or the write fails.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"append_integer expects int, got {type(value).__name__}")
        try:
            data: bytes = b"%d" % value
        except ValueError as exc:
            # int -> str digit limit (sys.set_int_max_str_digits)
            raise EncoderWriteError(f"Cannot format integer: {exc}") from exc
        self._segment(lambda: self._write(data))

    def append_float(self, value: float) -> None:
        """Append the shortest round-trippable decimal form of a float.

        Uses Python's ``repr`` formatting, e.g. ``0.1``, ``1.5``, ``1e+16``,
        ``nan`` and ``inf``.

        Raises:
            TypeError: If ``value`` is not a float.
        """
        if not isinstance(value, float):
            raise TypeError(f"append_float expects float, got {type(value).__name__}")
        data: bytes = float.__repr__(value).encode("ascii")
        self._segment(lambda: self._write(data))

    def append_text(self, text: str) -> None:
        """Append ``text`` verbatim.

        Raises:
            TypeError: If ``text`` is not a str.
            InvalidTextError: If ``text`` cannot be encoded as UTF-8; the
                buffer is left unchanged.
        """
        if not isinstance(text, str):
            raise TypeError(f"append_text expects str, got {type(text).__name__}")
        data: bytes = _encode_text(text, "Text")
        self._segment(lambda: self._write(data))

    def append_absent(self) -> None:
        """Append an absent value: the delimiter, unconditionally.

        Does not consult or clear ``is_start``.
        """
        self._ensure_live()
        mark: int = self._length
        try:
            self._write_delimiter()
        except Exception:
            self._length = mark
            raise

    def append_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` as URL-safe base64.

        The output region is reserved at its padded upper bound before
        encoding and trimmed to the written length afterwards.

        Raises:
            TypeError: If ``data`` is not a bytes-like object.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"append_bytes expects bytes, got {type(data).__name__}")

        octets: bytes | bytearray | memoryview = as_octets(data)

        def _payload() -> None:
            start: int = self._length
            reserved: int = max_encoded_length(len(octets))
            shortfall: int = start + reserved - len(self._buffer)
            if shortfall > 0:
                try:
                    self._buffer.extend(bytes(shortfall))
                except MemoryError as exc:
                    raise EncoderWriteError(f"Cannot grow output buffer: {exc}") from exc
            written: int = encode_into(self._buffer, start, octets, pad=self._pad_bytes)
            self._length = start + written

        self._segment(_payload)

    # --- Finalization ---

    def finish(self) -> str:
        """Consume the encoder and return the encoded text.

        Returns:
            str: All segments joined by the delimiter; empty if nothing was appended.

        Raises:
            EncoderStateError: If a record is still open or the encoder was
                already finished.
        """
        self._ensure_live()
        if self._open_records:
            raise EncoderStateError(
                f"Cannot finish: {self._open_records} record(s) still open"
            )
        self._finished = True
        # Every write path stored strictly-encoded UTF-8.
        result: str = self._buffer[: self._length].decode("utf-8")
        self._buffer = bytearray()
        self._length = 0
        return result
