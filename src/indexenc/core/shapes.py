# topmark:header:start
#
#   project      : IndexEnc
#   file         : shapes.py
#   file_relpath : src/indexenc/core/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape vocabulary for the indexed encoder.

A *shape* is the structural category of a value as reported by the traversal
driver: a primitive kind, an optional, a record, or one of the composite
shapes the indexed format cannot represent. The keys are stable and appear in
`UnsupportedShapeError` messages and in CLI error output.
"""

from __future__ import annotations

from typing import Final

from indexenc.core.enum_mixins import KeyedStrEnum


class Shape(KeyedStrEnum):
    """Structural category of a value being encoded."""

    # Supported shapes
    BOOL = ("bool", "boolean")
    INT = ("int", "integer", ("integer",))
    FLOAT = ("float", "floating point number")
    CHAR = ("char", "single character")
    STR = ("str", "text string", ("string", "text"))
    BYTES = ("bytes", "byte sequence")
    NONE = ("none", "absent optional", ("absent",))
    SOME = ("some", "present optional")
    RECORD = ("record", "record with named fields", ("struct",))

    # Unsupported shapes
    UNIT = ("unit", "unit value")
    UNIT_STRUCT = ("unit_struct", "record without fields")
    UNIT_VARIANT = ("unit_variant", "enum variant without payload")
    NEWTYPE_STRUCT = ("newtype_struct", "single-value wrapper")
    NEWTYPE_VARIANT = ("newtype_variant", "enum variant with a single payload")
    SEQ = ("seq", "sequence", ("list", "sequence"))
    TUPLE = ("tuple", "tuple")
    TUPLE_STRUCT = ("tuple_struct", "record with positional fields")
    TUPLE_VARIANT = ("tuple_variant", "enum variant with positional payload")
    MAP = ("map", "key-value map", ("dict", "mapping"))
    STRUCT_VARIANT = ("struct_variant", "enum variant with named payload")
    DISPLAY = ("display", "display-formatted value", ("collect_str",))

    @property
    def supported(self) -> bool:
        """Whether the indexed format can represent this shape."""
        return self in SUPPORTED_SHAPES


SUPPORTED_SHAPES: Final[frozenset[Shape]] = frozenset(
    {
        Shape.BOOL,
        Shape.INT,
        Shape.FLOAT,
        Shape.CHAR,
        Shape.STR,
        Shape.BYTES,
        Shape.NONE,
        Shape.SOME,
        Shape.RECORD,
    }
)
