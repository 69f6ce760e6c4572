# topmark:header:start
#
#   project      : IndexEnc
#   file         : api.py
#   file_relpath : src/indexenc/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public one-call API.

Example:
    ```python
    from dataclasses import dataclass

    from indexenc import to_string

    @dataclass
    class Point:
        x: int
        y: int

    assert to_string(Point(1, 2)) == "1,2"
    assert to_string(Point(1, 2), delimiter=":", map_like=True) == "x:1:y:2"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexenc.config.logging import get_logger
from indexenc.config.model import EncoderConfig
from indexenc.encoder.dispatch import IndexedEncoder
from indexenc.encoder.driver import encode_value

if TYPE_CHECKING:
    from indexenc.config.logging import IndexencLogger

logger: IndexencLogger = get_logger(__name__)


def new_encoder(config: EncoderConfig | None = None) -> IndexedEncoder:
    """Create a fresh encoder from a configuration snapshot.

    Args:
        config (EncoderConfig | None): Configuration; defaults apply when None.

    Returns:
        IndexedEncoder: An encoder ready for one encoding pass.
    """
    cfg: EncoderConfig = config or EncoderConfig()
    return IndexedEncoder(
        cfg.delimiter,
        map_like=cfg.map_like,
        capacity=cfg.capacity,
        pad_bytes=cfg.pad_bytes,
    )


def to_string(
    value: object,
    *,
    delimiter: str | None = None,
    map_like: bool | None = None,
    capacity: int | None = None,
    config: EncoderConfig | None = None,
) -> str:
    """Encode ``value`` into the indexed format.

    Keyword arguments win over ``config``, which wins over the defaults.

    Args:
        value (object): Record-like value (dataclass, named tuple, `Record`,
            `Encodable`) or a single primitive.
        delimiter (str | None): Segment separator.
        map_like (bool | None): Prefix record fields with their names.
        capacity (int | None): Bytes to pre-allocate.
        config (EncoderConfig | None): Base configuration.

    Returns:
        str: The encoded text.

    Raises:
        UnsupportedShapeError: If ``value`` contains a shape the format cannot
            represent.
        InvalidTextError: If a string is not valid Unicode text.
        ConfigError: If the effective delimiter is empty.
    """
    base: EncoderConfig = config or EncoderConfig()
    if delimiter is not None or map_like is not None or capacity is not None:
        draft = base.thaw().apply_overrides(
            {"delimiter": delimiter, "map_like": map_like, "capacity": capacity}
        )
        base = draft.freeze()

    encoder: IndexedEncoder = new_encoder(base)
    logger.trace(
        "Encoding %s (delimiter=%r, map_like=%s)",
        type(value).__name__,
        base.delimiter,
        base.map_like,
    )
    encode_value(value, encoder)
    return encoder.finish()
