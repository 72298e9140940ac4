# topmark:header:start
#
#   project      : TypeMark
#   file         : model.py
#   file_relpath : src/typemark/bump/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""State and result types of the bump workflow.

A bump moves through ``SELECTED -> APPLIED -> VERIFYING`` and ends in either
``RECONCILED`` (the checker ran and its report was reconciled) or ``INFRA_FAILED``
(the checker could not run and every selected file was put back).

`BumpPlan` is the mutable, per-invocation working state. It is never persisted.
`BumpResult` is the frozen summary returned to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typemark.checker.diagnostics import Diagnostic


class BumpState(str, Enum):
    """Lifecycle states of a bump."""

    SELECTED = "selected"
    APPLIED = "applied"
    VERIFYING = "verifying"
    RECONCILED = "reconciled"
    INFRA_FAILED = "infra_failed"

    @property
    def is_terminal(self) -> bool:
        """Return True for the two end states."""
        return self in (BumpState.RECONCILED, BumpState.INFRA_FAILED)


@dataclass
class BumpPlan:
    """Working state of one bump invocation.

    Attributes:
        root (Path): Project root (resolved).
        source_level (str): Level the selected files start at.
        target_level (str): Level the selected files are promoted to.
        selected (set[Path]): Files whose sigil equals ``source_level`` at selection time.
        diagnostics (list[Diagnostic]): Diagnostics reported by the checker.
        reverted (set[Path]): Selected files put back to ``source_level``.
        skipped (set[Path]): Selected files that lost their sigil before the rewrite.
        failed (dict[Path, str]): Files that could not be rewritten, with the reason.
        state (BumpState): Current lifecycle state.
        error (str | None): Infrastructure error text, if any.
    """

    root: Path
    source_level: str
    target_level: str
    selected: set[Path] = field(default_factory=lambda: set())
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])
    reverted: set[Path] = field(default_factory=lambda: set())
    skipped: set[Path] = field(default_factory=lambda: set())
    failed: dict[Path, str] = field(default_factory=lambda: {})
    state: BumpState = BumpState.SELECTED
    error: str | None = None

    def advance(self, state: BumpState) -> None:
        """Move to ``state``."""
        self.state = state

    def files_with_errors(self) -> set[Path]:
        """Return the selected files named by at least one diagnostic.

        Diagnostic paths are resolved relative to ``root`` unless absolute.
        Diagnostics without a file, and those on unselected files, are ignored.
        """
        named: set[Path] = set()
        for diag in self.diagnostics:
            if diag.file is None:
                continue
            p = Path(diag.file)
            resolved: Path = (p if p.is_absolute() else self.root / p).resolve()
            if resolved in self.selected:
                named.add(resolved)
        return named

    def to_result(self) -> BumpResult:
        """Freeze this plan into a `BumpResult`."""
        promoted: set[Path] = (
            self.selected - self.reverted - self.skipped - set(self.failed)
            if self.state == BumpState.RECONCILED
            else set()
        )
        return BumpResult(
            state=self.state,
            source_level=self.source_level,
            target_level=self.target_level,
            promoted=tuple(sorted(promoted)),
            reverted=tuple(sorted(self.reverted)),
            skipped=tuple(sorted(self.skipped)),
            failed=dict(sorted(self.failed.items())),
            diagnostics=tuple(self.diagnostics),
            error=self.error,
        )


@dataclass(frozen=True)
class BumpResult:
    """Outcome of a bump.

    Attributes:
        state (BumpState): ``RECONCILED`` or ``INFRA_FAILED``.
        source_level (str): Level the files started at.
        target_level (str): Level requested.
        promoted (tuple[Path, ...]): Files now at ``target_level``.
        reverted (tuple[Path, ...]): Files put back to ``source_level``.
        skipped (tuple[Path, ...]): Selected files left untouched (no sigil anymore).
        failed (dict[Path, str]): Files whose rewrite or rollback failed, with the reason.
        diagnostics (tuple[Diagnostic, ...]): Everything the checker reported.
        error (str | None): Infrastructure error text, or ``None``.
    """

    state: BumpState
    source_level: str
    target_level: str
    promoted: tuple[Path, ...] = ()
    reverted: tuple[Path, ...] = ()
    skipped: tuple[Path, ...] = ()
    failed: dict[Path, str] = field(default_factory=lambda: {})
    diagnostics: tuple[Diagnostic, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return True if the bump reconciled and no file failed."""
        return self.state == BumpState.RECONCILED and not self.failed

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this result."""
        return {
            "state": self.state.value,
            "source_level": self.source_level,
            "target_level": self.target_level,
            "promoted": [str(p) for p in self.promoted],
            "reverted": [str(p) for p in self.reverted],
            "skipped": [str(p) for p in self.skipped],
            "failed": {str(p): reason for p, reason in self.failed.items()},
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "error": self.error,
        }
