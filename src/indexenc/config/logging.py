# topmark:header:start
#
#   project      : IndexEnc
#   file         : logging.py
#   file_relpath : src/indexenc/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc logging with a TRACE level.

This module extends the standard logging module with a TRACE level below
DEBUG, an `IndexencLogger` class exposing `.trace()`, and a chalk-colored
formatter. The encoder logs per-record events at TRACE and rejected shapes at
DEBUG.

Everything lives under the ``indexenc`` package logger. Embedding the encoder
in an application stays silent until the application configures logging; the
CLI calls `setup_logging`, which only touches the package logger and leaves
the root configuration alone.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

PACKAGE_LOGGER_NAME: Final[str] = "indexenc"

LOG_LEVEL_ENV_VAR: Final[str] = "INDEXENC_LOG_LEVEL"


class IndexencLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(IndexencLogger)
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records by severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors INDEXENC_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    name_to_level = {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(v)


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the ``indexenc`` logger with a level and colored output.

    If ``level`` is None, the environment is consulted via
    `resolve_env_log_level`. Default is CRITICAL when unspecified.

    Args:
        level (int | None): Log level for the package logger.
        stream (TextIO | None): Destination stream. Defaults to `sys.stderr`.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    # stderr keeps the encoded output on stdout clean for piping
    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)


def get_logger(name: str) -> IndexencLogger:
    """Retrieve an IndexencLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        IndexencLogger: An IndexencLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("IndexencLogger", logger)
