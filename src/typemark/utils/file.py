# topmark:header:start
#
#   project      : TypeMark
#   file         : file.py
#   file_relpath : src/typemark/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path helpers for TypeMark."""

from __future__ import annotations

import os
from pathlib import Path


def compute_relpath(file_path: Path, root_path: Path | None) -> Path:
    """Compute the path of ``file_path`` relative to ``root_path``.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path | None): The base directory (current directory if ``None``).

    Returns:
        Path: The relative path; uses ``..`` segments when ``file_path`` lies
        outside ``root_path``.
    """
    resolved_path: Path = file_path.resolve()
    resolved_root: Path = (root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a subpath: fall back to os.path.relpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))
