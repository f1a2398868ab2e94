"""Levelled console logging with printf-style formatting."""

from __future__ import annotations

import enum
import sys
from typing import NoReturn

__all__ = [
    "LogLevel",
    "MAX_MESSAGE_LENGTH",
    "log_output",
    "info",
    "debug",
    "warning",
    "error",
    "fatal",
]

# A message, prefix included, never exceeds a 4 KiB buffer minus its terminator.
MAX_MESSAGE_LENGTH = 4 * 1024 - 1


class LogLevel(enum.IntEnum):
    INFO = 0
    DEBUG = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


_PREFIXES = {
    LogLevel.INFO: "[INFO] ",
    LogLevel.DEBUG: "[DEBUG] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
    LogLevel.FATAL: "[FATAL] ",
}


def log_output(level, fmt, *args):
    """Format and write a message; return the text written, or None for an unknown level.

    Info and debug go to standard output, warnings and worse to standard error.
    """
    try:
        level = LogLevel(level)
    except ValueError:
        return None

    body = fmt % args if args else fmt
    message = (_PREFIXES[level] + body)[:MAX_MESSAGE_LENGTH]

    stream = sys.stdout if level < LogLevel.WARNING else sys.stderr
    stream.write(message)
    stream.flush()
    return message


def info(fmt, *args):
    return log_output(LogLevel.INFO, fmt, *args)


def debug(fmt, *args):
    return log_output(LogLevel.DEBUG, fmt, *args)


def warning(fmt, *args):
    return log_output(LogLevel.WARNING, fmt, *args)


def error(fmt, *args):
    return log_output(LogLevel.ERROR, fmt, *args)


def fatal(fmt, *args) -> NoReturn:
    """Log at fatal level and exit with status 1."""
    log_output(LogLevel.FATAL, fmt, *args)
    raise SystemExit(1)