# topmark:header:start
#
#   project      : IndexEnc
#   file         : model.py
#   file_relpath : src/indexenc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder configuration model and merge policy.

This module defines:
    - `EncoderConfig`: an immutable snapshot of the construction parameters of
      one encoder (delimiter, map-like mode, capacity hint, byte padding).
    - `MutableEncoderConfig`: a mutable builder used while merging defaults,
      config files and explicit overrides; `freeze()` validates it into an
      `EncoderConfig`.

Precedence (lowest to highest): runtime defaults, config file, explicit
overrides (API keywords or CLI options).

Unknown keys and values of the wrong type are recorded as warning
diagnostics and otherwise ignored; only `freeze()` rejects a configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from indexenc.config.keys import Toml
from indexenc.config.loaders import extract_indexenc_table, load_defaults_dict, load_toml_dict
from indexenc.config.logging import get_logger
from indexenc.constants import DEFAULT_DELIMITER
from indexenc.core.diagnostics import Diagnostic, DiagnosticLog
from indexenc.core.errors import ConfigError

if TYPE_CHECKING:
    from indexenc.config.loaders import TomlTable
    from indexenc.config.logging import IndexencLogger

# ArgsLike: generic mapping accepted for overrides (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: IndexencLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class EncoderConfig:
    """Immutable encoder configuration.

    Attributes:
        delimiter (str): Separator between two segments; never empty.
        map_like (bool): Prefix every record field with its name.
        capacity (int | None): Bytes to pre-allocate; purely a performance hint.
        pad_bytes (bool): Keep ``=`` padding in base64-encoded byte blobs.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    delimiter: str = DEFAULT_DELIMITER
    map_like: bool = False
    capacity: int | None = None
    pad_bytes: bool = False
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableEncoderConfig:
        """Return a mutable copy of this frozen config."""
        return MutableEncoderConfig(
            delimiter=self.delimiter,
            map_like=self.map_like,
            capacity=self.capacity,
            pad_bytes=self.pad_bytes,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict."""
        encoder: TomlTable = {
            Toml.KEY_DELIMITER: self.delimiter,
            Toml.KEY_MAP_LIKE: self.map_like,
            Toml.KEY_PAD_BYTES: self.pad_bytes,
        }
        if self.capacity is not None:
            encoder[Toml.KEY_CAPACITY] = self.capacity
        return {Toml.SECTION_ENCODER: encoder}


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableEncoderConfig:
    """Mutable encoder configuration used while merging sources.

    ``None`` means "not set by this layer" so that `merge_with` can tell
    explicit values from inherited ones.

    Attributes:
        delimiter (str | None): Segment separator.
        map_like (bool | None): Map-like mode.
        capacity (int | None): Capacity hint.
        pad_bytes (bool | None): Base64 padding.
        config_files (list[Path]): Provenance.
        diagnostics (DiagnosticLog): Warnings collected while loading.
    """

    delimiter: str | None = None
    map_like: bool | None = None
    capacity: int | None = None
    pad_bytes: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> EncoderConfig:
        """Validate and freeze this builder into an `EncoderConfig`.

        Unset values fall back to the `EncoderConfig` defaults.

        Raises:
            ConfigError: If the delimiter is empty or the capacity negative.
        """
        delimiter: str = self.delimiter if self.delimiter is not None else DEFAULT_DELIMITER
        if not delimiter:
            raise ConfigError("Config invalid: `delimiter` must not be empty.")
        if self.capacity is not None and self.capacity < 0:
            raise ConfigError(f"Config invalid: `capacity` must be >= 0, got {self.capacity}.")

        return EncoderConfig(
            delimiter=delimiter,
            map_like=bool(self.map_like),
            capacity=self.capacity,
            pad_bytes=bool(self.pad_bytes),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableEncoderConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableEncoderConfig:
        """Load configuration from a single TOML file.

        Supports ``indexenc.toml`` (top-level tables) and ``pyproject.toml``
        (``[tool.indexenc]``).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableEncoderConfig: The parsed layer; empty if a ``pyproject.toml``
            has no ``[tool.indexenc]`` section (a warning is recorded).

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableEncoderConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)
        section: TomlTable | None = extract_indexenc_table(toml_data, path)
        if section is None:
            draft = cls()
            draft.diagnostics.add_warning(f"[tool.indexenc] section missing in {path}")
        else:
            draft = cls.from_toml_dict(section, source=str(path))
        draft.config_files = [path]
        logger.debug("Generated MutableEncoderConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        source: str = "<defaults>",
    ) -> MutableEncoderConfig:
        """Build a builder from a parsed IndexEnc TOML table.

        Args:
            data (TomlTable): Table holding an ``[encoder]`` section.
            source (str): Label used in diagnostics.

        Returns:
            MutableEncoderConfig: The parsed layer.
        """
        draft = cls()

        for key in data:
            if key != Toml.SECTION_ENCODER:
                draft.diagnostics.add_warning(f"{source}: unknown section or key '{key}' ignored")

        encoder_any: Any = data.get(Toml.SECTION_ENCODER, {})
        if not isinstance(encoder_any, dict):
            draft.diagnostics.add_warning(
                f"{source}: [{Toml.SECTION_ENCODER}] must be a table, "
                f"got {type(encoder_any).__name__}"
            )
            return draft
        encoder: TomlTable = cast("TomlTable", encoder_any)

        for key in encoder:
            if key not in Toml.ENCODER_KEYS:
                draft.diagnostics.add_warning(
                    f"{source}: unknown key '{Toml.SECTION_ENCODER}.{key}' ignored"
                )

        draft.delimiter = draft._typed(encoder, Toml.KEY_DELIMITER, str, source)
        draft.map_like = draft._typed(encoder, Toml.KEY_MAP_LIKE, bool, source)
        draft.capacity = draft._typed(encoder, Toml.KEY_CAPACITY, int, source)
        draft.pad_bytes = draft._typed(encoder, Toml.KEY_PAD_BYTES, bool, source)
        return draft

    def _typed(self, table: TomlTable, key: str, expected: type[Any], source: str) -> Any:
        if key not in table:
            return None
        value: Any = table[key]
        # bool is an int subclass; a capacity of `true` is a mistake
        if expected is int and isinstance(value, bool):
            value_ok = False
        else:
            value_ok = isinstance(value, expected)
        if not value_ok:
            self.diagnostics.add_warning(
                f"{source}: '{Toml.SECTION_ENCODER}.{key}' must be "
                f"{expected.__name__}, got {type(value).__name__}; ignored"
            )
            return None
        return value

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableEncoderConfig) -> MutableEncoderConfig:
        """Return a new builder where values set in ``other`` win.

        Args:
            other (MutableEncoderConfig): The higher-precedence layer.

        Returns:
            MutableEncoderConfig: The merged builder.
        """
        merged = MutableEncoderConfig(
            delimiter=other.delimiter if other.delimiter is not None else self.delimiter,
            map_like=other.map_like if other.map_like is not None else self.map_like,
            capacity=other.capacity if other.capacity is not None else self.capacity,
            pad_bytes=other.pad_bytes if other.pad_bytes is not None else self.pad_bytes,
            config_files=[*self.config_files, *other.config_files],
        )
        merged.diagnostics.extend(self.diagnostics.items)
        merged.diagnostics.extend(other.diagnostics.items)
        return merged

    def apply_overrides(self, args: ArgsLike) -> MutableEncoderConfig:
        """Apply explicit overrides in place; ``None`` values are ignored.

        Args:
            args (ArgsLike): Mapping with any of ``delimiter``, ``map_like``,
                ``capacity`` and ``pad_bytes``.

        Returns:
            MutableEncoderConfig: ``self``, for chaining.
        """
        if args.get("delimiter") is not None:
            self.delimiter = str(args["delimiter"])
        if args.get("map_like") is not None:
            self.map_like = bool(args["map_like"])
        if args.get("capacity") is not None:
            self.capacity = int(args["capacity"])
        if args.get("pad_bytes") is not None:
            self.pad_bytes = bool(args["pad_bytes"])
        return self

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        overrides: ArgsLike | None = None,
    ) -> MutableEncoderConfig:
        """Merge defaults, an optional config file, and overrides.

        Args:
            config_file (Path | None): TOML file to load, if any.
            overrides (ArgsLike | None): Explicit overrides (highest precedence).

        Returns:
            MutableEncoderConfig: The merged builder (not yet frozen).

        Raises:
            ConfigError: If ``config_file`` cannot be read or parsed.
        """
        merged: MutableEncoderConfig = cls.from_defaults()
        if config_file is not None:
            merged = merged.merge_with(cls.from_toml_file(config_file))
        if overrides:
            merged.apply_overrides(overrides)
        return merged
