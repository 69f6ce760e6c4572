# topmark:header:start
#
#   project      : IndexEnc
#   file         : options.py
#   file_relpath : src/indexenc/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color) and their
resolution logic so the group and its commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, ParamSpec, TypeVar

import click

from indexenc.cli.errors import IndexencUsageError
from indexenc.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        IndexencUsageError: If both flags are used together.

    Behavior:
        ``-vvv`` selects TRACE, ``-vv`` DEBUG, ``-v`` INFO, ``-q`` ERROR.
        The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise IndexencUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_color(color: bool | None) -> bool:
    """Resolve whether to emit ANSI colors.

    An explicit ``--color``/``--no-color`` wins; otherwise ``NO_COLOR`` disables
    color and a TTY on stdout enables it.
    """
    if color is not None:
        return color
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (up to -vvv for TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color/--no-color`` switch (default: auto-detect)."""
    f = click.option(
        "--color/--no-color",
        "color",
        default=None,
        help="Force or disable ANSI colors (default: auto).",
    )(f)
    return f
