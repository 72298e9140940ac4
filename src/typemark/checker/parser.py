# topmark:header:start
#
#   project      : TypeMark
#   file         : parser.py
#   file_relpath : src/typemark/checker/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse the free-text report of the type-checker into diagnostics.

The report is a stream of blocks. Each block starts with a *header* line::

    <location>:<line>: <message> <help-url>/<code>

followed by any number of context lines (source excerpts, secondary
``file:line: ...`` references, autocorrect hints, blank lines)::

    lib/a.rb:28: Not enough arguments provided for method Foo#bar https://srb.help/7004
        28 |              bar "hello"
                          ^^^^^^^^^^^
        lib/a.rb:11: Foo#bar defined here

Rules:
    * Only a line ending in a help reference with a trailing integer code is a
      header. Secondary references look like headers but carry no help reference,
      so they stay in the context of the enclosing diagnostic.
    * The location is matched greedily up to the *last* ``:<digits>:`` delimiter,
      so paths containing colons, spaces or punctuation are captured whole.
    * Blank lines never close a diagnostic; only the next header (or the end of
      the report) does. Trailing blank lines of a block are dropped.
    * ``No errors! Great job.`` and the ``Errors: <n>`` summary end the report.
      A usage/help dump seen before any header means the checker did not run on
      a project: the result is empty. Dev-build banner lines are ignored.

The parser is total: malformed input yields fewer (or emptier) diagnostics,
never an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from typemark.checker.diagnostics import Diagnostic
from typemark.config.logging import get_logger

if TYPE_CHECKING:
    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)


HEADER_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<file>\S.*)              # location (greedy: the last ":<digits>: " wins)
    :(?P<line>\d+):\s           # line number
    (?P<message>.*?)            # message
    \s*https?://\S*/            # help reference ...
    (?P<code>\d+)               # ... ending in the error code
    \s*$
    """,
    re.VERBOSE,
)

NO_ERRORS_SENTINEL: Final[str] = "No errors! Great job."

SUMMARY_RE: Final[re.Pattern[str]] = re.compile(r"^Errors: \d+")

DEV_BANNER: Final[frozenset[str]] = frozenset(
    {
        "👋 Hey there! Heads up that this is not a release build of sorbet.",
        "Release builds are faster and more well-supported by the Sorbet team.",
        "Check out the README to learn how to build Sorbet in release mode.",
        "To forcibly silence this error, either pass --silence-dev-message,",
        "or set SORBET_SILENCE_DEV_MESSAGE=1 in your shell environment.",
    }
)

USAGE_SENTINELS: Final[tuple[str, ...]] = (
    "No sorbet/ directory found.",
    "You must pass either `-e` or at least one folder or ruby file.",
    "Usage:",
)


@dataclass
class _OpenDiagnostic:
    """A diagnostic under construction: its header fields plus collected context."""

    file: str
    line: int
    code: int
    message: str
    context: list[str] = field(default_factory=lambda: [])

    def close(self) -> Diagnostic:
        lines: list[str] = self.context
        while lines and not lines[-1].strip():
            lines.pop()
        return Diagnostic(
            file=self.file,
            line=self.line,
            code=self.code,
            message=self.message,
            context=tuple(lines),
        )


def match_header(line: str) -> _OpenDiagnostic | None:
    """Return a new open diagnostic if ``line`` is a header line, else ``None``."""
    m: re.Match[str] | None = HEADER_RE.match(line)
    if m is None:
        return None
    return _OpenDiagnostic(
        file=m.group("file"),
        line=int(m.group("line")),
        code=int(m.group("code")),
        message=m.group("message").strip(),
    )


def is_usage_dump(line: str) -> bool:
    """Return True if ``line`` starts a usage/help dump of the checker."""
    stripped: str = line.strip()
    return any(stripped.startswith(s) for s in USAGE_SENTINELS)


def parse_diagnostics(text: str) -> list[Diagnostic]:
    """Parse a type-checker report into diagnostics, in emission order.

    Args:
        text (str): The combined stdout/stderr of the checker.

    Returns:
        list[Diagnostic]: The diagnostics found; empty for a clean run, a usage dump
        or unparseable text.
    """
    diagnostics: list[Diagnostic] = []
    current: _OpenDiagnostic | None = None

    for line in text.splitlines():
        if line.strip() == NO_ERRORS_SENTINEL or SUMMARY_RE.match(line):
            logger.trace("End of report: %r", line)
            break
        if line.strip() in DEV_BANNER:
            continue
        header: _OpenDiagnostic | None = match_header(line)
        if header is not None:
            if current is not None:
                diagnostics.append(current.close())
            current = header
            continue
        if current is not None:
            current.context.append(line)
        elif not diagnostics and is_usage_dump(line):
            logger.debug("Checker printed a usage dump, no diagnostics: %r", line)
            return []

    if current is not None:
        diagnostics.append(current.close())

    logger.debug("Parsed %d diagnostic(s)", len(diagnostics))
    return diagnostics
