# topmark:header:start
#
#   project      : TypeMark
#   file         : test_file_utils.py
#   file_relpath : tests/utils/test_file_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `typemark.utils.file`."""

from __future__ import annotations

from pathlib import Path

import pytest

from typemark.utils.file import compute_relpath


def test_relpath_inside_root(tmp_path: Path) -> None:
    assert compute_relpath(tmp_path / "lib" / "a.rb", tmp_path) == Path("lib/a.rb")


def test_relpath_outside_root_uses_parent_segments(tmp_path: Path) -> None:
    root: Path = tmp_path / "app"
    root.mkdir()

    assert compute_relpath(tmp_path / "other.rb", root) == Path("../other.rb")


def test_relpath_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert compute_relpath(tmp_path / "a.rb", None) == Path("a.rb")
