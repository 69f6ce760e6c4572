# topmark:header:start
#
#   project      : IndexEnc
#   file         : main.py
#   file_relpath : src/indexenc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc command-line entry point.

Group-level options (verbosity and color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from indexenc.cli.commands.encode import encode_command
from indexenc.cli.commands.version import version_command
from indexenc.cli.console import ClickConsole
from indexenc.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color,
    resolve_verbosity,
)
from indexenc.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from indexenc.cli.console import ConsoleLike
    from indexenc.config.logging import IndexencLogger

logger: IndexencLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color: bool | None,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color (bool | None): Explicit ``--color``/``--no-color`` choice, if any.
    """
    ctx.ensure_object(dict)

    # CLI flags win over INDEXENC_LOG_LEVEL; setup_logging() applies the default.
    level: int | None = None
    if verbose or quiet:
        level = resolve_verbosity(verbose, quiet)
    else:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    ctx.obj["verbosity"] = verbose - quiet
    setup_logging(level=level)

    enable_color: bool = resolve_color(color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="IndexEnc CLI: encode records into a single delimited line.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color: bool | None,
) -> None:
    """Entry point for the IndexEnc CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color=color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'indexenc encode [PATH]' to encode a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(encode_command)

if __name__ == "__main__":
    cli()
