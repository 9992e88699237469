"""Coloured console logging with levels and output modes."""

from __future__ import annotations

import enum
import functools
import os
import sys


class Level(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class Mode(enum.IntFlag):
    """What decorates a log message: a coloured prefix, a trailing newline."""

    NONE = 0
    FORMAT = 1
    NEWLINE = 2
    ALL = FORMAT | NEWLINE


_UNKNOWN_FORMAT = ("???", "\x1b[1;40m{}\x1b[0m: ")

_FORMATS = {
    Level.DEBUG: ("debug", "\x1b[1;35m{}\x1b[0m: "),
    Level.INFO: ("info", "\x1b[1m{}\x1b[0m: "),
    Level.WARNING: ("warning", "\x1b[1;33m{}\x1b[0m: "),
    Level.ERROR: ("error", "\x1b[1;31m{}\x1b[0m: "),
}


@functools.lru_cache(maxsize=None)
def debug_enabled() -> bool:
    """Return True when the DEBUG environment variable is exactly "1".

    The answer is read once and remembered.
    """
    return os.environ.get("DEBUG") == "1"


def log(level: int, msg: str, mode: Mode = Mode.ALL) -> None:
    """Write ``msg`` at ``level``; errors go to stderr, the rest to stdout."""
    if level == Level.DEBUG and not debug_enabled():
        return

    out = sys.stderr if level >= Level.ERROR else sys.stdout
    name, template = _FORMATS.get(level, _UNKNOWN_FORMAT)

    parts = []
    if mode & Mode.FORMAT:
        parts.append(template.format(name))
    parts.append(msg)
    if mode & Mode.NEWLINE:
        parts.append("\n")
    out.write("".join(parts))


def debug(msg: str) -> None:
    """Log a debug message (shown only when debugging is enabled)."""
    log(Level.DEBUG, msg)


def info(msg: str) -> None:
    """Log an informational message."""
    log(Level.INFO, msg)


def warning(msg: str) -> None:
    """Log a warning."""
    log(Level.WARNING, msg)


def error(msg: str) -> None:
    """Log an error to stderr."""
    log(Level.ERROR, msg)