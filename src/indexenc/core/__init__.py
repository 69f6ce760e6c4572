# topmark:header:start
#
#   project      : IndexEnc
#   file         : __init__.py
#   file_relpath : src/indexenc/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across IndexEnc.

The ``indexenc.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (encoder, config, CLI, tests) without
pulling in Click or console concerns.

Included modules:

- ``errors``
  The exception hierarchy (encoding failures, protocol misuse, config errors).

- ``shapes``
  The `Shape` vocabulary reported by traversal and carried by
  `UnsupportedShapeError`.

- ``diagnostics``
  Severity-tagged messages collected while loading configuration.

- ``enum_mixins``
  `KeyedStrEnum`, the keyed string enum behind `Shape` and the CLI formats.
"""

from __future__ import annotations
