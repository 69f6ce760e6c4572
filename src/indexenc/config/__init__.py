# topmark:header:start
#
#   project      : IndexEnc
#   file         : __init__.py
#   file_relpath : src/indexenc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for IndexEnc encoders.

Public surface:
    - `EncoderConfig` / `MutableEncoderConfig`: immutable snapshot and mutable builder.
    - `discover_config_file`: locate ``indexenc.toml`` or a ``pyproject.toml``
      with ``[tool.indexenc]`` in a directory.

Logging helpers live in `indexenc.config.logging`.
"""

from __future__ import annotations

from indexenc.config.loaders import discover_config_file
from indexenc.config.model import EncoderConfig, MutableEncoderConfig

__all__ = [
    "EncoderConfig",
    "MutableEncoderConfig",
    "discover_config_file",
]
