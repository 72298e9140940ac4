# topmark:header:start
#
#   project      : TypeMark
#   file         : errors.py
#   file_relpath : src/typemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core exceptions for TypeMark.

These exceptions are raised by the library layer (sigils, checker, bump) and are
independent of Click. The CLI translates them into
[`TypemarkCliError`][typemark.cli.errors.TypemarkCliError] subclasses with
dedicated exit codes.

Malformed checker output is never an error: the diagnostic parser is total and
degrades to fewer (or emptier) diagnostics instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TypemarkError(Exception):
    """Base class for all TypeMark library errors."""


class InvalidLevelError(TypemarkError, ValueError):
    """Raised when a requested strictness level is not a recognized level.

    Attributes:
        level (str): The offending level, exactly as requested.
    """

    def __init__(self, level: str) -> None:
        self.level = level
        super().__init__(f"Invalid strictness level: {level!r}")


class MarkerNotFoundError(TypemarkError):
    """Raised when content has no ``# typed:`` sigil to rewrite.

    The content (or file) is left untouched.

    Attributes:
        path (Path | None): The file without a sigil, when known.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        where: str = f" in {path}" if path is not None else ""
        super().__init__(f"No strictness sigil found{where}")


class SigilLockError(TypemarkError):
    """Raised when a file is already locked by another live process.

    Attributes:
        path (Path): The file whose lock could not be acquired.
    """

    def __init__(self, path: Path, detail: str = "") -> None:
        self.path = path
        suffix: str = f" ({detail})" if detail else ""
        super().__init__(f"Cannot lock {path}{suffix}")


class CheckerInvocationError(TypemarkError):
    """Raised when the external type-checker could not run at all.

    This is an infrastructure failure: the process could not be started or was
    terminated abnormally. A checker that runs and reports type errors is *not*
    an invocation error.

    Attributes:
        command (tuple[str, ...]): The command that failed.
    """

    def __init__(self, message: str, *, command: tuple[str, ...] = ()) -> None:
        self.command = command
        super().__init__(message)
