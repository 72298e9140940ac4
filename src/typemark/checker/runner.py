# topmark:header:start
#
#   project      : TypeMark
#   file         : runner.py
#   file_relpath : src/typemark/checker/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Invoke the external type-checker.

The checker is a collaborator behind a tiny contract: given a project root it
returns the combined text output and a success flag
([`CheckerResult`][typemark.checker.runner.CheckerResult]). Anything callable
with that shape satisfies the [`Checker`][typemark.checker.runner.Checker]
protocol, which lets tests and embedding tools inject their own checker.

[`SubprocessChecker`][typemark.checker.runner.SubprocessChecker] is the default
implementation: it runs the configured command (``bundle exec srb tc`` unless
configured otherwise) with the project root as working directory, waits for it
and buffers its whole output. There is no timeout at this layer.

A process that cannot be started, or that is killed by a signal, raises
[`CheckerInvocationError`][typemark.core.errors.CheckerInvocationError]. A
process that runs and exits non-zero because it found type errors is a normal
result with ``success=False``.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from typemark.config.logging import get_logger
from typemark.constants import DEFAULT_CHECKER_COMMAND
from typemark.core.errors import CheckerInvocationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class CheckerResult:
    """Output of one checker run.

    Attributes:
        output (str): Combined text output (stderr merged into stdout when captured).
        success (bool): True when the checker exited with status 0.
    """

    output: str
    success: bool


class Checker(Protocol):
    """Callable that type-checks a whole project root."""

    def __call__(self, root: Path) -> CheckerResult:
        """Run the checker over ``root`` and return its output."""
        ...


class SubprocessChecker:
    """Run the type-checker as a child process.

    Args:
        command (Sequence[str]): Command and arguments, e.g. ``("bundle", "exec", "srb", "tc")``.
        extra_args (Sequence[str]): Arguments appended to ``command``.
        capture_err (bool): Merge stderr into the captured output. The checker prints its
            report on stderr, so this is on by default; turn it off to let stderr reach
            the terminal unchanged.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_CHECKER_COMMAND,
        *,
        extra_args: Sequence[str] = (),
        capture_err: bool = True,
    ) -> None:
        self.command: tuple[str, ...] = (*command, *extra_args)
        self.capture_err = capture_err

    def __call__(self, root: Path) -> CheckerResult:
        """Run the checker in ``root`` and buffer its output.

        Args:
            root (Path): Project root, used as working directory.

        Returns:
            CheckerResult: Output text and success flag.

        Raises:
            CheckerInvocationError: If the process cannot be started or is killed.
        """
        if not self.command:
            raise CheckerInvocationError("No checker command configured")

        logger.info("Running checker in %s: %s", root, " ".join(self.command))
        try:
            proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
                self.command,
                cwd=root,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if self.capture_err else None,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CheckerInvocationError(
                f"Cannot run checker {self.command[0]!r}: {exc}", command=self.command
            ) from exc

        if proc.returncode < 0:
            raise CheckerInvocationError(
                f"Checker {self.command[0]!r} was terminated by signal {-proc.returncode}",
                command=self.command,
            )

        logger.debug("Checker exited with status %d", proc.returncode)
        return CheckerResult(output=proc.stdout or "", success=proc.returncode == 0)

    def __repr__(self) -> str:
        return f"SubprocessChecker({list(self.command)!r})"
