# topmark:header:start
#
#   project      : TypeMark
#   file         : errors.py
#   file_relpath : src/typemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TypeMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`typemark.core.errors`) are
    translated into one of these by the commands.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from typemark.core.exit_codes import ExitCode


class TypemarkCliError(click.ClickException):
    """Base class for all TypeMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TypemarkUsageError(TypemarkCliError):
    """Error for command-line invocation errors (invalid flags, args or levels)."""

    exit_code = ExitCode.USAGE_ERROR


class TypemarkConfigError(TypemarkCliError):
    """Error for configuration errors (e.g. not inside a type-checked project)."""

    exit_code = ExitCode.CONFIG_ERROR


class TypemarkIOError(TypemarkCliError):
    """Error for I/O errors reading or writing files."""

    exit_code = ExitCode.IO_ERROR


class TypemarkCheckerError(TypemarkCliError):
    """Error when the external type-checker could not be run."""

    exit_code = ExitCode.CHECKER_ERROR


class TypemarkUnexpectedError(TypemarkCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
