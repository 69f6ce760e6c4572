# topmark:header:start
#
#   project      : IndexEnc
#   file         : version.py
#   file_relpath : src/indexenc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc `version` command.

Prints the current IndexEnc version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from indexenc.cli.cli_types import KeyedEnumParam
from indexenc.constants import INDEXENC_VERSION
from indexenc.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from indexenc.cli.console import ConsoleLike


class VersionFormat(KeyedStrEnum):
    """Output formats of the ``version`` command."""

    TEXT = ("text", "Plain text", ("plain",))
    JSON = ("json", "JSON object")


@click.command(
    name="version",
    help="Show the current version of IndexEnc.",
)
@click.option(
    "--format",
    "output_format",
    type=KeyedEnumParam(VersionFormat),
    default=None,
    help=f"Output format ({', '.join(VersionFormat.keys())}).",
)
def version_command(
    *,
    output_format: VersionFormat | None = None,
) -> None:
    """Show the current version of IndexEnc.

    Args:
        output_format (VersionFormat | None): Optional output format (text by default).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: VersionFormat = output_format or VersionFormat.TEXT
    if fmt is VersionFormat.JSON:
        console.print(json.dumps({"version": INDEXENC_VERSION}))
    else:
        console.print(console.styled(INDEXENC_VERSION, bold=True))
