# topmark:header:start
#
#   project      : IndexEnc
#   file         : __init__.py
#   file_relpath : src/indexenc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc package.

IndexEnc encodes structured values (booleans, numbers, characters, strings,
byte blobs, optionals and records with named fields) into one flat string
whose segments are joined by a caller-chosen delimiter:

    Point(x=1, y=2)  ->  "1,2"        (list-like)
                     ->  "x:1:y:2"    (map-like, delimiter ":")

Sequences, maps, tuples and enum variants have no representation in this
format and are rejected with `UnsupportedShapeError`.
"""

from __future__ import annotations

from indexenc.api import new_encoder, to_string
from indexenc.config.model import EncoderConfig, MutableEncoderConfig
from indexenc.core.errors import (
    ConfigError,
    EncodeError,
    EncoderStateError,
    EncoderWriteError,
    IndexencError,
    InvalidTextError,
    UnsupportedShapeError,
)
from indexenc.core.shapes import Shape
from indexenc.encoder import (
    Char,
    Encodable,
    IndexedEncoder,
    Record,
    RecordEncoder,
    ValueVisitor,
    encode_value,
)

__all__ = [
    "Char",
    "ConfigError",
    "Encodable",
    "EncodeError",
    "EncoderConfig",
    "EncoderStateError",
    "EncoderWriteError",
    "IndexedEncoder",
    "IndexencError",
    "InvalidTextError",
    "MutableEncoderConfig",
    "Record",
    "RecordEncoder",
    "Shape",
    "UnsupportedShapeError",
    "ValueVisitor",
    "encode_value",
    "new_encoder",
    "to_string",
]
