# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark package.

TypeMark manages the per-file strictness sigils (``# typed: <level>``) of a
gradually-typed code base. It parses type-checker reports into structured
diagnostics, reads and rewrites sigils, and raises strictness across a file set
with automatic rollback of files that regress. It exposes both a CLI and a small
typed API for automation.
"""

from __future__ import annotations

from typemark.bump import BumpResult, BumpState, bump
from typemark.checker import Diagnostic, DiagnosticSort, parse_diagnostics
from typemark.sigils import Strictness

__all__ = [
    "BumpResult",
    "BumpState",
    "Diagnostic",
    "DiagnosticSort",
    "Strictness",
    "bump",
    "parse_diagnostics",
]
