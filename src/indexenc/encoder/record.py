# topmark:header:start
#
#   project      : IndexEnc
#   file         : record.py
#   file_relpath : src/indexenc/encoder/record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record traversal protocol.

A `RecordEncoder` is handed out by `IndexedEncoder.begin_record` and driven
field by field by the value being encoded:

    rec = encoder.begin_record("Point", 2)
    rec.field("x", 1)
    rec.field("y", 2)
    rec.end()

In map-like mode each field contributes two segments (name, then value);
otherwise only the value. Nested records recurse on the same encoder, so the
output stays flat with no grouping markers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexenc.config.logging import get_logger
from indexenc.core.errors import EncoderStateError
from indexenc.encoder.driver import encode_value

if TYPE_CHECKING:
    from indexenc.config.logging import IndexencLogger
    from indexenc.encoder.dispatch import IndexedEncoder

logger: IndexencLogger = get_logger(__name__)


class RecordEncoder:
    """Field-by-field writer for one record.

    Args:
        encoder (IndexedEncoder): The encoder that owns the output buffer.
        name (str): Record type name (logged only; never encoded).
    """

    __slots__ = ("_encoder", "_name", "_closed")

    def __init__(self, encoder: IndexedEncoder, name: str) -> None:
        self._encoder: IndexedEncoder = encoder
        self._name: str = name
        self._closed: bool = False

    @property
    def closed(self) -> bool:
        return self._closed

    def field(self, name: str, value: object) -> None:
        """Encode one field, prefixed by ``name`` in map-like mode.

        Args:
            name (str): Field name.
            value (object): Field value, dispatched like any other value.

        Raises:
            EncoderStateError: If the record was already ended.
        """
        if self._closed:
            raise EncoderStateError(f"Field {name!r} written after end of record {self._name!r}")
        if self._encoder.map_like:
            self._encoder.append_text(name)
        encode_value(value, self._encoder)

    def end(self) -> None:
        """Close the record. Has no effect on the output.

        Raises:
            EncoderStateError: If the record was already ended.
        """
        if self._closed:
            raise EncoderStateError(f"Record {self._name!r} ended twice")
        self._closed = True
        self._encoder._close_record(self._name)  # pyright: ignore[reportPrivateUsage]
