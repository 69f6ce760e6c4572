# topmark:header:start
#
#   project      : IndexEnc
#   file         : io.py
#   file_relpath : src/indexenc/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for the ``encode`` command.

Documents are read from a path or STDIN and turned into a `Record`: tables
(TOML) or objects (JSON) become records whose fields keep the document's key
order. Arrays stay lists, so the encoder rejects them as sequences.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from indexenc.cli.errors import (
    IndexencEncodingError,
    IndexencFileNotFoundError,
    IndexencIOError,
)
from indexenc.config.logging import get_logger
from indexenc.core.enum_mixins import KeyedStrEnum
from indexenc.encoder.values import Record

if TYPE_CHECKING:
    from indexenc.config.logging import IndexencLogger

logger: IndexencLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


class InputFormat(KeyedStrEnum):
    """Document formats accepted by ``indexenc encode``."""

    TOML = ("toml", "TOML document", ("tml",))
    JSON = ("json", "JSON document")


def infer_input_format(path: str | None) -> InputFormat:
    """Infer the input format from a path suffix (``.json`` => JSON, else TOML)."""
    if path and path != STDIN_MARKER and Path(path).suffix.lower() == ".json":
        return InputFormat.JSON
    return InputFormat.TOML


def read_input_text(path: str | None) -> str:
    """Read the whole input document.

    Args:
        path (str | None): File path, or ``None`` / ``"-"`` for STDIN.

    Returns:
        str: The document text.

    Raises:
        IndexencFileNotFoundError: If ``path`` does not exist.
        IndexencIOError: If ``path`` cannot be read.
        IndexencEncodingError: If the content is not valid UTF-8.
    """
    if path is None or path == STDIN_MARKER:
        logger.debug("Reading document from STDIN")
        return click.get_text_stream("stdin").read()

    file_path = Path(path)
    if not file_path.exists():
        raise IndexencFileNotFoundError(f"No such file: {path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise IndexencEncodingError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise IndexencIOError(f"Cannot read {path}: {exc}") from exc


def parse_document(text: str, fmt: InputFormat, *, source: str = "<stdin>") -> Record:
    """Parse a TOML or JSON document into a `Record`.

    Args:
        text (str): The document text.
        fmt (InputFormat): The document format.
        source (str): Label used in error messages; also the root record name.

    Returns:
        Record: The root record.

    Raises:
        IndexencEncodingError: If the document is malformed or its root is not
            a table/object.
    """
    data: Any
    if fmt is InputFormat.JSON:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise IndexencEncodingError(f"Invalid JSON in {source}: {exc}") from exc
    else:
        try:
            data = tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise IndexencEncodingError(f"Invalid TOML in {source}: {exc}") from exc

    if not isinstance(data, dict):
        raise IndexencEncodingError(
            f"The root of {source} must be a {'object' if fmt is InputFormat.JSON else 'table'}, "
            f"got {type(data).__name__}"
        )
    return Record.from_mapping(data, name=Path(source).stem or "document")
