# topmark:header:start
#
#   project      : IndexEnc
#   file         : diagnostics.py
#   file_relpath : src/indexenc/cli/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing rendering of configuration diagnostics.

Diagnostics collected while loading ``indexenc.toml`` / ``pyproject.toml`` are
written to stderr so the encoded line on stdout stays machine-readable.

Behavior:
    - No diagnostics, or ``-q``: nothing is printed.
    - Otherwise a triage header (``Config diagnostics: 1 error, 2 warnings``)
      is followed by one line per warning and error, colored by severity.
    - Info lines are only shown with ``-v``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexenc.config.logging import get_logger
from indexenc.core.diagnostics import (
    DiagnosticLevel,
    DiagnosticStats,
    compute_diagnostic_stats,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from indexenc.cli.console import ConsoleLike
    from indexenc.config.logging import IndexencLogger
    from indexenc.core.diagnostics import Diagnostic

logger: IndexencLogger = get_logger(__name__)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("s" if count != 1 else "")


def diagnostic_triage(stats: DiagnosticStats) -> str:
    """Return a compact summary such as ``"1 error, 2 warnings"``.

    Info diagnostics are only counted when nothing more severe is present.
    """
    parts: list[str] = []
    if stats.n_error:
        parts.append(_plural(stats.n_error, "error"))
    if stats.n_warning:
        parts.append(_plural(stats.n_warning, "warning"))
    if stats.n_info and not (stats.n_error or stats.n_warning):
        parts.append(_plural(stats.n_info, "info"))
    return ", ".join(parts) if parts else "none"


def render_config_diagnostics(
    *,
    console: ConsoleLike,
    diagnostics: Sequence[Diagnostic],
    verbosity: int,
) -> None:
    """Print configuration diagnostics to stderr.

    Args:
        console (ConsoleLike): Program-output console.
        diagnostics (Sequence[Diagnostic]): Diagnostics of the effective config.
        verbosity (int): ``-v`` count minus ``-q`` count.
    """
    if not diagnostics or verbosity < 0:
        return

    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    logger.debug("Config diagnostics: %d total", stats.total)
    if stats.n_info == stats.total and verbosity == 0:
        return

    console.print_err(
        DiagnosticLevel.INFO.color(f"Config diagnostics: {diagnostic_triage(stats)}")
    )
    for diag in diagnostics:
        if diag.level is DiagnosticLevel.INFO and verbosity == 0:
            continue
        console.print_err(diag.level.color(f"  [{diag.level.value}] {diag.message}"))
