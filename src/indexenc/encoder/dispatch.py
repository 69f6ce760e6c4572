# topmark:header:start
#
#   project      : IndexEnc
#   file         : dispatch.py
#   file_relpath : src/indexenc/encoder/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value dispatcher: the visitor entry points of the indexed encoder.

`IndexedEncoder` implements `ValueVisitor` on top of `AppendEngine`. Each
supported shape is routed to one append primitive:

| Shape            | Output                                   |
|------------------|------------------------------------------|
| bool             | ``"1"`` / ``"0"``                        |
| int              | decimal digits                           |
| float            | shortest round-trip decimal              |
| char, str        | the text verbatim                        |
| bytes            | URL-safe base64                          |
| absent optional  | a bare delimiter                         |
| present optional | the contained value, no extra delimiter  |
| record           | its fields via `RecordEncoder`           |

Every other shape (sequences, maps, tuples, unit values, enum variants,
display-only values) is rejected with `UnsupportedShapeError` before the
buffer is touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from indexenc.config.logging import get_logger
from indexenc.core.errors import EncoderStateError, UnsupportedShapeError
from indexenc.core.shapes import Shape
from indexenc.encoder.driver import encode_value
from indexenc.encoder.engine import AppendEngine
from indexenc.encoder.record import RecordEncoder

if TYPE_CHECKING:
    from indexenc.config.logging import IndexencLogger
    from indexenc.encoder.values import RecordVisitor

logger: IndexencLogger = get_logger(__name__)


class IndexedEncoder(AppendEngine):
    """Encoder for the flat, delimiter-separated indexed format.

    One instance encodes exactly one value and is consumed by `finish()`.

    Example:
        ```python
        enc = IndexedEncoder(":", map_like=True)
        rec = enc.begin_record("Point", 2)
        rec.field("x", 1)
        rec.field("y", 2)
        rec.end()
        assert enc.finish() == "x:1:y:2"
        ```
    """

    __slots__ = ()

    def _reject(self, shape: Shape) -> NoReturn:
        logger.debug("Rejecting unsupported shape '%s'", shape.key)
        raise UnsupportedShapeError(shape)

    # --- Supported shapes ---

    def encode_bool(self, value: bool) -> None:
        self.append_text("1" if value else "0")

    def encode_int(self, value: int) -> None:
        self.append_integer(value)

    def encode_float(self, value: float) -> None:
        self.append_float(value)

    def encode_char(self, value: str) -> None:
        """Append a single character.

        Raises:
            ValueError: If ``value`` is not exactly one character long.
        """
        if len(value) != 1:
            raise ValueError(f"encode_char expects exactly one character, got {value!r}")
        self.append_text(value)

    def encode_str(self, value: str) -> None:
        self.append_text(value)

    def encode_bytes(self, value: bytes | bytearray | memoryview) -> None:
        self.append_bytes(value)

    def encode_none(self) -> None:
        self.append_absent()

    def encode_some(self, value: object) -> None:
        """Encode the contained value exactly as if it were met directly."""
        encode_value(value, self)

    def begin_record(self, name: str, length: int) -> RecordEncoder:
        """Open a record; ``name`` and ``length`` do not affect the output.

        Returns:
            RecordEncoder: The field writer for this record.
        """
        self._ensure_live()
        self._open_records += 1
        logger.trace("Begin record %s (%d fields, depth %d)", name, length, self._open_records)
        return RecordEncoder(self, name)

    def _close_record(self, name: str) -> None:
        if self._open_records <= 0:
            raise EncoderStateError(f"Record {name!r} closed but no record is open")
        self._open_records -= 1
        logger.trace("End record %s (depth %d)", name, self._open_records)

    # --- Unsupported shapes ---

    def encode_unit(self) -> None:
        self._reject(Shape.UNIT)

    def encode_unit_struct(self, name: str) -> None:
        self._reject(Shape.UNIT_STRUCT)

    def encode_unit_variant(self, name: str, index: int, variant: str) -> None:
        self._reject(Shape.UNIT_VARIANT)

    def encode_newtype_struct(self, name: str, value: object) -> None:
        self._reject(Shape.NEWTYPE_STRUCT)

    def encode_newtype_variant(self, name: str, index: int, variant: str, value: object) -> None:
        self._reject(Shape.NEWTYPE_VARIANT)

    def begin_seq(self, length: int | None) -> RecordVisitor:
        self._reject(Shape.SEQ)

    def begin_tuple(self, length: int) -> RecordVisitor:
        self._reject(Shape.TUPLE)

    def begin_tuple_struct(self, name: str, length: int) -> RecordVisitor:
        self._reject(Shape.TUPLE_STRUCT)

    def begin_tuple_variant(self, name: str, index: int, variant: str, length: int) -> RecordVisitor:
        self._reject(Shape.TUPLE_VARIANT)

    def begin_map(self, length: int | None) -> RecordVisitor:
        self._reject(Shape.MAP)

    def begin_struct_variant(
        self, name: str, index: int, variant: str, length: int
    ) -> RecordVisitor:
        self._reject(Shape.STRUCT_VARIANT)

    def collect_str(self, value: object) -> None:
        self._reject(Shape.DISPLAY)
