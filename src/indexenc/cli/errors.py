# topmark:header:start
#
#   project      : IndexEnc
#   file         : errors.py
#   file_relpath : src/indexenc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IndexEnc CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console if one is present in the Click
context (see `show()`), and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from indexenc.cli.exit_codes import ExitCode


class IndexencCliError(click.ClickException):
    """Base class for all IndexEnc CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class IndexencUsageError(IndexencCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class IndexencConfigError(IndexencCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class IndexencFileNotFoundError(IndexencCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class IndexencIOError(IndexencCliError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class IndexencEncodingError(IndexencCliError):
    """Error when the input cannot be encoded (unsupported shape, bad text or document)."""

    exit_code = ExitCode.ENCODING_ERROR


class IndexencUnexpectedError(IndexencCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
