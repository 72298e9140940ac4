# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/checker/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-checker integration: running the checker and parsing its report.

Modules:

- ``diagnostics``: the immutable ``Diagnostic`` record and sort/select helpers.
- ``parser``: ``parse_diagnostics()``, a total parser for the checker's text report.
- ``runner``: the ``Checker`` protocol and the default ``SubprocessChecker``.
"""

from __future__ import annotations

from typemark.checker.diagnostics import (
    Diagnostic,
    DiagnosticSort,
    select_diagnostics,
    sort_diagnostics,
)
from typemark.checker.parser import parse_diagnostics
from typemark.checker.runner import Checker, CheckerResult, SubprocessChecker

__all__ = [
    "Checker",
    "CheckerResult",
    "Diagnostic",
    "DiagnosticSort",
    "SubprocessChecker",
    "parse_diagnostics",
    "select_diagnostics",
    "sort_diagnostics",
]
