# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across TypeMark.

The ``typemark.core`` package provides small, reusable building blocks that are
safe to import from anywhere in the codebase (CLI, config, library, tests)
without pulling in rendering or user-interface concerns.

Included modules:

- ``errors``
  Library exceptions (invalid levels, missing sigils, lock contention, checker
  invocation failures).

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.
"""

from __future__ import annotations
