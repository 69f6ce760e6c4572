# topmark:header:start
#
#   project      : IndexEnc
#   file         : encode.py
#   file_relpath : src/indexenc/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc `encode` command.

Reads a TOML or JSON document from a file or STDIN, turns its root table into
a record and prints the encoded line on stdout.

Input:
  - ``indexenc encode data.toml``
  - ``indexenc encode --input-format json -`` (reads STDIN)

Configuration:
  - ``--config PATH`` loads a specific file.
  - Otherwise ``indexenc.toml`` or ``pyproject.toml`` (``[tool.indexenc]``) in
    the current directory is used, unless ``--no-config`` is given.
  - ``--delimiter``, ``--map-like/--list-like``, ``--capacity`` and
    ``--pad-bytes`` override any file value.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from indexenc.api import new_encoder
from indexenc.cli.cli_types import KeyedEnumParam
from indexenc.cli.diagnostics import render_config_diagnostics
from indexenc.cli.errors import (
    IndexencConfigError,
    IndexencEncodingError,
    IndexencUsageError,
)
from indexenc.cli.io import (
    STDIN_MARKER,
    InputFormat,
    infer_input_format,
    parse_document,
    read_input_text,
)
from indexenc.config.loaders import discover_config_file
from indexenc.config.logging import get_logger
from indexenc.config.model import MutableEncoderConfig
from indexenc.core.errors import ConfigError, EncodeError, UnsupportedShapeError
from indexenc.core.shapes import Shape
from indexenc.encoder.driver import encode_value

if TYPE_CHECKING:
    from indexenc.cli.console import ConsoleLike
    from indexenc.config.logging import IndexencLogger
    from indexenc.config.model import EncoderConfig
    from indexenc.encoder.dispatch import IndexedEncoder
    from indexenc.encoder.values import Record

logger: IndexencLogger = get_logger(__name__)


def resolve_config(
    *,
    config_path: Path | None,
    no_config: bool,
    overrides: dict[str, object],
) -> EncoderConfig:
    """Build the effective configuration for one ``encode`` run.

    Args:
        config_path (Path | None): Explicit ``--config`` file.
        no_config (bool): Skip config discovery in the current directory.
        overrides (dict[str, object]): CLI overrides (``None`` values are ignored).

    Returns:
        EncoderConfig: The frozen configuration.

    Raises:
        IndexencUsageError: If ``--config`` and ``--no-config`` are combined.
        IndexencConfigError: If the config file is unreadable or invalid.
    """
    if config_path is not None and no_config:
        raise IndexencUsageError("The '--config' and '--no-config' options are mutually exclusive.")

    config_file: Path | None = config_path
    if config_file is None and not no_config:
        config_file = discover_config_file(Path.cwd())
        if config_file is not None:
            logger.info("Using config file %s", config_file)

    try:
        draft: MutableEncoderConfig = MutableEncoderConfig.load_merged(
            config_file=config_file,
            overrides=overrides,
        )
        return draft.freeze()
    except ConfigError as exc:
        raise IndexencConfigError(str(exc)) from exc


@click.command(
    name="encode",
    help="Encode a TOML or JSON document into a single delimited line.",
)
@click.argument(
    "path",
    required=False,
    default=None,
    metavar="[PATH]",
)
@click.option(
    "--input-format",
    "input_format",
    type=KeyedEnumParam(InputFormat),
    default=None,
    help=f"Input document format ({', '.join(InputFormat.keys())}). "
    "Defaults to the file suffix, else toml.",
)
@click.option(
    "--delimiter",
    "-d",
    "delimiter",
    type=str,
    default=None,
    help="Segment separator (default: ',').",
)
@click.option(
    "--map-like/--list-like",
    "map_like",
    default=None,
    help="Prefix every field with its name (map-like) or emit values only (list-like).",
)
@click.option(
    "--capacity",
    type=click.IntRange(min=0),
    default=None,
    help="Bytes to pre-allocate for the output buffer.",
)
@click.option(
    "--pad-bytes/--no-pad-bytes",
    "pad_bytes",
    default=None,
    help="Keep '=' padding in base64-encoded byte blobs.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Use this config file instead of discovering one.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore indexenc.toml / pyproject.toml in the current directory.",
)
def encode_command(
    *,
    path: str | None,
    input_format: InputFormat | None,
    delimiter: str | None,
    map_like: bool | None,
    capacity: int | None,
    pad_bytes: bool | None,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Encode a document and print the result.

    Args:
        path (str | None): Input file, or ``-``/omitted for STDIN.
        input_format (InputFormat | None): Explicit document format.
        delimiter (str | None): Delimiter override.
        map_like (bool | None): Map-like override.
        capacity (int | None): Capacity hint override.
        pad_bytes (bool | None): Padding override.
        config_path (Path | None): Explicit config file.
        no_config (bool): Disable config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: EncoderConfig = resolve_config(
        config_path=config_path,
        no_config=no_config,
        overrides={
            "delimiter": delimiter,
            "map_like": map_like,
            "capacity": capacity,
            "pad_bytes": pad_bytes,
        },
    )
    render_config_diagnostics(
        console=console,
        diagnostics=config.diagnostics,
        verbosity=ctx.obj.get("verbosity", 0),
    )

    fmt: InputFormat = input_format or infer_input_format(path)
    source: str = path if path and path != STDIN_MARKER else "<stdin>"
    logger.debug("Encoding %s as %s", source, fmt.key)

    text: str = read_input_text(path)
    record: Record = parse_document(text, fmt, source=source)

    encoder: IndexedEncoder = new_encoder(config)
    try:
        encode_value(record, encoder)
        result: str = encoder.finish()
    except UnsupportedShapeError as exc:
        raise IndexencEncodingError(
            f"Cannot encode {source}: values of shape '{exc.shape.key}' are not supported "
            f"(supported: {', '.join(s.key for s in Shape if s.supported)})"
        ) from exc
    except EncodeError as exc:
        raise IndexencEncodingError(f"Cannot encode {source}: {exc}") from exc

    console.print(result)
