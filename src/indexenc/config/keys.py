# topmark:header:start
#
#   project      : IndexEnc
#   file         : keys.py
#   file_relpath : src/indexenc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for IndexEnc configuration.

Keys defined here are external configuration API (``indexenc.toml`` and
``[tool.indexenc]`` in ``pyproject.toml``); renaming or removing one is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by IndexEnc configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "indexenc"

    # [encoder]
    SECTION_ENCODER: Final[str] = "encoder"

    KEY_DELIMITER: Final[str] = "delimiter"
    KEY_MAP_LIKE: Final[str] = "map_like"
    KEY_CAPACITY: Final[str] = "capacity"
    KEY_PAD_BYTES: Final[str] = "pad_bytes"

    ENCODER_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_DELIMITER, KEY_MAP_LIKE, KEY_CAPACITY, KEY_PAD_BYTES}
    )


# Config file names; `indexenc.toml` wins when both exist in one directory.
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
INDEXENC_TOML_NAME: Final[str] = "indexenc.toml"
