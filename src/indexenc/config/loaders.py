# topmark:header:start
#
#   project      : IndexEnc
#   file         : loaders.py
#   file_relpath : src/indexenc/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads IndexEnc configuration from:
- the runtime defaults (defined in code, no I/O), and
- on-disk TOML files (`indexenc.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from indexenc.config.keys import INDEXENC_TOML_NAME, PYPROJECT_TOML_NAME, Toml
from indexenc.config.logging import get_logger
from indexenc.constants import DEFAULT_DELIMITER
from indexenc.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from indexenc.config.logging import IndexencLogger

TomlTable = dict[str, Any]

logger: IndexencLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return IndexEnc's runtime defaults as a TOML-table-compatible dict.

    Returns:
        TomlTable: A new dict; callers may mutate it.

    Notes:
        ``capacity`` is unset by default (no pre-allocation), so it does not
        appear in the table.
    """
    return {
        Toml.SECTION_ENCODER: {
            Toml.KEY_DELIMITER: DEFAULT_DELIMITER,
            Toml.KEY_MAP_LIKE: False,
            Toml.KEY_PAD_BYTES: False,
        },
    }


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Label used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", source, e)
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    return parse_toml_text(text, source=str(path))


def extract_indexenc_table(data: TomlTable, path: Path | None = None) -> TomlTable | None:
    """Return the IndexEnc part of a parsed config document.

    For ``pyproject.toml`` the ``[tool.indexenc]`` table is returned (or None
    when absent); any other file is used as-is.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path | None): The file the document was read from.

    Returns:
        TomlTable | None: The IndexEnc configuration table, or None.
    """
    if path is not None and path.name == PYPROJECT_TOML_NAME:
        tool_any: Any = data.get(Toml.SECTION_TOOL, {})
        if not isinstance(tool_any, dict):
            return None
        section: Any = cast("TomlTable", tool_any).get(Toml.SECTION_TOOL_NAME)
        if not isinstance(section, dict) or not section:
            logger.debug("No [tool.indexenc] section in %s", path)
            return None
        return cast("TomlTable", section)
    return data


def discover_config_file(directory: Path) -> Path | None:
    """Return the config file to use in ``directory``, if any.

    ``indexenc.toml`` wins over a ``pyproject.toml`` carrying ``[tool.indexenc]``.

    Args:
        directory (Path): Directory to look in (not searched recursively).

    Returns:
        Path | None: The chosen config file, or None.
    """
    candidate: Path = directory / INDEXENC_TOML_NAME
    if candidate.is_file():
        return candidate

    pyproject: Path = directory / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except ConfigError:
            # An unrelated broken pyproject.toml is not our config file.
            logger.warning("Ignoring unreadable %s during config discovery", pyproject)
            return None
        if extract_indexenc_table(data, pyproject) is not None:
            return pyproject
    return None
