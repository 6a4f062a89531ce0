"""
Logging for ghcpick.

Every module logs through a child of the ``ghcpick`` logger, which stays
silent until the CLI calls :func:`setup_logging`. The CLI maps its ``-v``
count to a level and installs one handler on stderr; stdout is never
touched because it may carry the published ``key=value`` line.
"""

from __future__ import annotations

import os
import sys
import logging
from typing import IO, Optional

from ghcpick.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

_ROOT = "ghcpick"

# -v count -> level; anything above the last entry is DEBUG
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO)


class LevelColorFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname) if self.use_color else None
        if color:
            # Other handlers must keep seeing the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def stream_supports_color(stream: IO[str]) -> bool:
    """Return True if ANSI colors should be written to ``stream``.

    ``NO_COLOR`` (set by ``--no-color``) and ``CI`` always win over the
    terminal check.
    """
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def verbosity_to_level(verbosity: int) -> int:
    """Map the CLI ``-v`` count to a logging level.

    Examples:
        >>> verbosity_to_level(0) == logging.WARNING
        True
        >>> verbosity_to_level(5) == logging.DEBUG
        True
    """
    if verbosity < 0:
        verbosity = 0
    if verbosity < len(_VERBOSITY_LEVELS):
        return _VERBOSITY_LEVELS[verbosity]
    return logging.DEBUG


def setup_logging(
    verbosity: int = 0,
    *,
    stream: Optional[IO[str]] = None,
) -> int:
    """Route ghcpick logging to ``stream`` (stderr by default).

    Replaces any handler installed by an earlier call. From ``-vv`` on, the
    format adds a timestamp and the logger name.

    Returns:
        The level that was applied.
    """
    stream = stream or sys.stderr
    level = verbosity_to_level(verbosity)
    fmt = LOG_VERBOSE_FORMAT if level == logging.DEBUG else LOG_DEFAULT_FORMAT

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        LevelColorFormatter(
            fmt,
            datefmt=LOG_DATE_FORMAT,
            use_color=stream_supports_color(stream),
        )
    )

    root_logger = logging.getLogger(_ROOT)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the ghcpick namespace.

    Args:
        name: Logger name, relative (``"core.resolver"``) or absolute
            (``"ghcpick.core.resolver"``).
    """
    if not name or name == _ROOT:
        logger = logging.getLogger(_ROOT)
    elif name.startswith(f"{_ROOT}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{_ROOT}.{name}")

    # Silent until setup_logging() runs
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger
