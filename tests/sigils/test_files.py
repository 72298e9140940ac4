# topmark:header:start
#
#   project      : TypeMark
#   file         : test_files.py
#   file_relpath : tests/sigils/test_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the file-scoped sigil helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import write_source
from typemark.core.errors import MarkerNotFoundError
from typemark.sigils.files import (
    SigilChangeReport,
    change_sigil_in_file,
    change_sigil_in_files,
    file_strictness,
    files_with_strictness,
    iter_source_files,
)
from typemark.sigils.locking import lock_path_for

if TYPE_CHECKING:
    from pathlib import Path


def test_file_strictness(tmp_path: Path) -> None:
    path: Path = write_source(tmp_path, "a.rb", "strict")

    assert file_strictness(path) == "strict"


def test_file_strictness_of_missing_file_is_none(tmp_path: Path) -> None:
    assert file_strictness(tmp_path / "missing.rb") is None


def test_file_strictness_of_undecodable_file_is_none(tmp_path: Path) -> None:
    path: Path = tmp_path / "bin.rb"
    path.write_bytes(b"# typed: true\n\xff\xfe\xfa")

    assert file_strictness(path) is None


def test_iter_source_files_is_sorted_absolute_and_filtered(tmp_path: Path) -> None:
    write_source(tmp_path, "b.rb", "true")
    write_source(tmp_path, "lib/a.rb", "true")
    write_source(tmp_path, "vendor/c.rb", "true")
    (tmp_path / "notes.txt").write_text("# typed: true\n", encoding="utf-8")

    files: list[Path] = iter_source_files(tmp_path, exclude_patterns=["vendor/"])

    assert files == sorted(files)
    assert all(p.is_absolute() for p in files)
    assert [p.relative_to(tmp_path.resolve()).as_posix() for p in files] == ["b.rb", "lib/a.rb"]


def test_files_with_strictness_selects_on_raw_value(tmp_path: Path) -> None:
    write_source(tmp_path, "a.rb", "false")
    write_source(tmp_path, "b.rb", "true")
    write_source(tmp_path, "c.rb", "  false  ")
    write_source(tmp_path, "d.rb", None)
    write_source(tmp_path, "e.rb", "weird")

    assert [p.name for p in files_with_strictness(tmp_path, "false")] == ["a.rb", "c.rb"]
    assert [p.name for p in files_with_strictness(tmp_path, "weird")] == ["e.rb"]


def test_change_sigil_in_file(tmp_path: Path) -> None:
    path: Path = write_source(tmp_path, "a.rb", "false", body="# typed: ignore\nclass A; end\n")

    assert change_sigil_in_file(path, "true") is True
    assert path.read_text(encoding="utf-8") == "# typed: true\n# typed: ignore\nclass A; end\n"
    assert not lock_path_for(path).exists()


def test_change_sigil_in_file_without_sigil(tmp_path: Path) -> None:
    path: Path = write_source(tmp_path, "a.rb", None)

    with pytest.raises(MarkerNotFoundError) as excinfo:
        change_sigil_in_file(path, "true")

    assert excinfo.value.path == path
    assert path.read_text(encoding="utf-8") == "class A; end\n"
    assert not lock_path_for(path).exists()


def test_change_sigil_in_files_reports_each_file(tmp_path: Path) -> None:
    ok: Path = write_source(tmp_path, "ok.rb", "false")
    bare: Path = write_source(tmp_path, "bare.rb", None)
    missing: Path = tmp_path / "missing.rb"
    locked: Path = write_source(tmp_path, "locked.rb", "false")
    lock_path_for(locked).write_text("not json\n", encoding="utf-8")

    report: SigilChangeReport = change_sigil_in_files([ok, bare, missing, locked], "true")

    assert report.changed == [ok]
    assert report.skipped == [bare]
    assert set(report.failed) == {missing, locked}
    assert not report.ok
    assert file_strictness(ok) == "true"
    assert file_strictness(locked) == "false"


def test_change_sigil_in_files_empty(tmp_path: Path) -> None:
    report: SigilChangeReport = change_sigil_in_files([], "true")

    assert report == SigilChangeReport()
    assert report.ok
