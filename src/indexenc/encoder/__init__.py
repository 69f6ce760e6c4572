# topmark:header:start
#
#   project      : IndexEnc
#   file         : __init__.py
#   file_relpath : src/indexenc/encoder/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The indexed encoding engine.

Layers (leaf first):

- ``binary``: URL-safe base64 into a pre-sized buffer region.
- ``engine``: `AppendEngine`, the output buffer and delimiter discipline.
- ``dispatch``: `IndexedEncoder`, one visitor entry point per value shape.
- ``record``: `RecordEncoder`, the per-field record protocol.
- ``driver``: `encode_value`, which walks Python values and calls the visitor.
- ``values``: protocol and value types (`ValueVisitor`, `Encodable`, `Char`, `Record`).
"""

from __future__ import annotations

from indexenc.encoder.dispatch import IndexedEncoder
from indexenc.encoder.driver import encode_value, record_fields
from indexenc.encoder.engine import AppendEngine
from indexenc.encoder.record import RecordEncoder
from indexenc.encoder.values import Char, Encodable, Record, RecordVisitor, ValueVisitor

__all__ = [
    "AppendEngine",
    "Char",
    "Encodable",
    "IndexedEncoder",
    "Record",
    "RecordEncoder",
    "RecordVisitor",
    "ValueVisitor",
    "encode_value",
    "record_fields",
]
