# topmark:header:start
#
#   project      : TypeMark
#   file         : logging.py
#   file_relpath : src/typemark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for TypeMark.

TypeMark logs what it does to sigils and to the checker (selection, rewrites,
locks, rollbacks) on **stderr**; stdout belongs to program output. Importing
this module registers a ``TRACE`` level below ``DEBUG`` for lock and rewrite
details, and installs `TypemarkLogger` as the logger class.

The level comes from ``-v``/``-q`` on the command line, or from the
``TYPEMARK_LOG_LEVEL`` environment variable, which wins when set.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "TYPEMARK_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class TypemarkLogger(logging.Logger):
    """Logger with a `trace` method for the ``TRACE`` level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at ``TRACE`` level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(TypemarkLogger)

# Lowest level first; a record takes the color of the highest threshold it reaches.
LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity with yachalk."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        color: Callable[[str], str] = chalk.dim
        for threshold, level_color in LEVEL_COLORS:
            if record.levelno >= threshold:
                color = level_color
        return color(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TYPEMARK_LOG_LEVEL``, or ``None``.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``...) and
    numeric levels (``"10"``). Unknown names count as unset.
    """
    value: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value)


def setup_logging(level: int | None = None) -> None:
    """Send TypeMark's log records to stderr at ``level``.

    Args:
        level (int | None): Logging level; when ``None``, ``TYPEMARK_LOG_LEVEL``
            decides, and logging stays silent below ``CRITICAL`` without it.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    # Show where a record comes from when debugging
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> TypemarkLogger:
    """Return the `TypemarkLogger` called ``name`` (usually ``__name__``)."""
    return cast("TypemarkLogger", logging.getLogger(name))
