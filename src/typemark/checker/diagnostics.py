# topmark:header:start
#
#   project      : TypeMark
#   file         : diagnostics.py
#   file_relpath : src/typemark/checker/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured diagnostics reported by the external type-checker.

Sections:
    * Diagnostic: immutable record for one reported issue (location, code,
      message and raw context lines).
    * DiagnosticSort: the supported sort modes.
    * sort_diagnostics / select_diagnostics: ordering, filtering and truncation
      helpers shared by the CLI and the bump workflow.

Ordering:
    The *natural order* compares diagnostics by file path, then by line number.
    ``Diagnostic.__lt__`` implements it, so ``sorted(diagnostics)`` uses it.
    Sorting by code breaks ties with the natural order; anything left equal keeps
    its emission order (Python's sort is stable).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from typemark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """One issue reported by the type-checker.

    Attributes:
        file (str | None): Path exactly as written in the report (may contain spaces,
            dashes or backslashes).
        line (int | None): Line number of the issue.
        code (int | None): Checker error code (e.g. ``7003``).
        message (str): Single-line message, trimmed, without the help reference.
        context (tuple[str, ...]): Raw follow-up lines (source excerpts, secondary
            references, autocorrect hints), indentation untouched.
    """

    file: str | None
    line: int | None
    code: int | None
    message: str
    context: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.code is not None and (self.file is None or self.line is None):
            raise ValueError("A diagnostic with a code must carry a file and a line")

    def natural_key(self) -> tuple[str, int]:
        """Return the natural sort key: ``(file, line)``."""
        return (self.file or "", self.line or 0)

    def code_key(self) -> tuple[int, str, int]:
        """Return the sort key used when sorting by code (natural order breaks ties)."""
        return (self.code or 0, *self.natural_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return self.natural_key() < other.natural_key()

    @property
    def location(self) -> str:
        """Return ``file:line`` (or whatever part of it is known)."""
        if self.file is None:
            return ""
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this diagnostic."""
        return {
            "file": self.file,
            "line": self.line,
            "code": self.code,
            "message": self.message,
            "context": list(self.context),
        }


class DiagnosticSort(str, Enum):
    """Sort modes for diagnostics.

    Members:
        NATURAL: File path, then line number.
        CODE: Error code, then the natural order.
    """

    NATURAL = "default"
    CODE = "code"


def sort_diagnostics(
    diagnostics: Iterable[Diagnostic],
    by: DiagnosticSort = DiagnosticSort.NATURAL,
) -> list[Diagnostic]:
    """Return a new list of diagnostics sorted by the requested mode.

    Args:
        diagnostics (Iterable[Diagnostic]): Diagnostics to sort.
        by (DiagnosticSort): Sort mode.

    Returns:
        list[Diagnostic]: The sorted diagnostics.
    """
    if by == DiagnosticSort.CODE:
        return sorted(diagnostics, key=Diagnostic.code_key)
    return sorted(diagnostics)


def select_diagnostics(
    diagnostics: Iterable[Diagnostic],
    *,
    sort: DiagnosticSort | None = None,
    code: int | None = None,
    limit: int | None = None,
) -> list[Diagnostic]:
    """Sort, filter by code and truncate diagnostics, in that order.

    Args:
        diagnostics (Iterable[Diagnostic]): Diagnostics in emission order.
        sort (DiagnosticSort | None): Sort mode; ``None`` means the natural order.
        code (int | None): Keep only diagnostics with this code.
        limit (int | None): Keep at most this many diagnostics.

    Returns:
        list[Diagnostic]: The selected diagnostics.
    """
    selected: list[Diagnostic] = sort_diagnostics(diagnostics, sort or DiagnosticSort.NATURAL)
    if code is not None:
        selected = [d for d in selected if d.code == code]
    if limit is not None:
        selected = selected[: max(limit, 0)]
    logger.debug(
        "Selected %d diagnostic(s) (sort=%s, code=%s, limit=%s)", len(selected), sort, code, limit
    )
    return selected
