# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/sigils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Strictness sigils (``# typed: <level>``): reading, validation and rewriting.

Modules:

- ``strictness``: the closed vocabulary of recognized levels.
- ``store``: pure functions over file content.
- ``files``: file-scoped helpers applying the content functions to files on disk.
- ``locking``: the per-file write lock held during a rewrite.
"""

from __future__ import annotations

from typemark.sigils.files import (
    SigilChangeReport,
    change_sigil_in_file,
    change_sigil_in_files,
    file_strictness,
    files_with_strictness,
    iter_source_files,
)
from typemark.sigils.store import is_valid_strictness, sigil_string, strictness, update_sigil
from typemark.sigils.strictness import Strictness, is_recognized, validate_level

__all__ = [
    "SigilChangeReport",
    "Strictness",
    "change_sigil_in_file",
    "change_sigil_in_files",
    "file_strictness",
    "files_with_strictness",
    "is_recognized",
    "is_valid_strictness",
    "iter_source_files",
    "sigil_string",
    "strictness",
    "update_sigil",
    "validate_level",
]
