# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/bump/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The bump workflow: promote files to a stricter level, keep only what type-checks."""

from __future__ import annotations

from typemark.bump.model import BumpPlan, BumpResult, BumpState
from typemark.bump.orchestrator import bump

__all__ = [
    "BumpPlan",
    "BumpResult",
    "BumpState",
    "bump",
]
