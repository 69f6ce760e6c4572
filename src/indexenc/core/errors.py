# topmark:header:start
#
#   project      : IndexEnc
#   file         : errors.py
#   file_relpath : src/indexenc/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc exception hierarchy.

Two families of failure exist:

- `EncodeError` and its subclasses abort an encoding pass. They are ordinary,
  recoverable errors: the caller must discard the partial output and treat the
  whole encoding attempt as failed.
- `EncoderStateError` signals misuse of the encoder protocol (finishing twice,
  finishing with an open record, writing a field after `end()`). These are
  programming errors and are not meant to be caught in normal control flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from indexenc.core.shapes import Shape


class IndexencError(Exception):
    """Base exception for all IndexEnc errors."""


class EncodeError(IndexencError):
    """An encoding pass failed; partial output must be discarded."""


class UnsupportedShapeError(EncodeError):
    """The value shape has no representation in the indexed format.

    Args:
        shape (Shape): The rejected shape.

    Attributes:
        shape (Shape): The rejected shape; ``shape.key`` is its stable name.
    """

    def __init__(self, shape: Shape) -> None:
        self.shape: Shape = shape
        super().__init__(f"Unsupported shape: {shape.key} ({shape.label})")


class InvalidTextError(EncodeError):
    """Text could not be encoded as UTF-8 (e.g. it contains lone surrogates)."""


class EncoderWriteError(EncodeError):
    """The output buffer could not be grown or written.

    This is the typed form of an allocation failure; it is not part of the
    normal control-flow taxonomy but is still surfaced instead of leaving a
    corrupted buffer behind.
    """


class EncoderStateError(IndexencError, RuntimeError):
    """The encoder protocol was used out of order."""


class ConfigError(IndexencError, ValueError):
    """Invalid or unreadable encoder configuration."""
