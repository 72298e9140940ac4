# topmark:header:start
#
#   project      : TypeMark
#   file         : test_sigils_command.py
#   file_relpath : tests/cli/test_sigils_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `sigils` lists files with their strictness."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import write_source

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _tree(root: Path) -> None:
    write_source(root, "b.rb", "strict")
    write_source(root, "a.rb", "false")
    write_source(root, "lib/c.rb", None)
    write_source(root, "lib/d.rb", "loose")
    write_source(root, "vendor/e.rb", "true")
    (root / "notes.txt").write_text("# typed: true\n", encoding="utf-8")


def test_sigils_lists_every_source_file(tmp_path: Path) -> None:
    """Files are listed sorted, with `-` for a missing sigil."""
    _tree(tmp_path)

    result: Result = run_cli_in(tmp_path, ["--no-color", "sigils"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [
        "a.rb: false",
        "b.rb: strict",
        "lib/c.rb: -",
        "lib/d.rb: loose",
        "vendor/e.rb: true",
    ]


def test_sigils_filter_by_level(tmp_path: Path) -> None:
    """`--strictness` keeps only the files at that raw level."""
    _tree(tmp_path)

    result: Result = run_cli_in(tmp_path, ["--no-color", "sigils", "--strictness", "loose"])

    assert result.stdout.splitlines() == ["lib/d.rb: loose"]


def test_sigils_honors_exclude_patterns(tmp_path: Path) -> None:
    """`[files] exclude_patterns` leaves matching files out."""
    _tree(tmp_path)
    (tmp_path / "typemark.toml").write_text(
        '[files]\nexclude_patterns = ["vendor/"]\n', encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["--no-color", "sigils"])

    assert "vendor/e.rb: true" not in result.stdout
    assert "a.rb: false" in result.stdout


def test_sigils_json(tmp_path: Path) -> None:
    """`--format json` returns file/strictness records."""
    _tree(tmp_path)

    result: Result = run_cli_in(tmp_path, ["sigils", "--format", "json"])

    records = json.loads(result.stdout)
    assert records[0] == {"file": "a.rb", "strictness": "false"}
    assert {"file": "lib/c.rb", "strictness": None} in records


def test_sigils_ndjson(tmp_path: Path) -> None:
    """`--format ndjson` prints one record per line."""
    _tree(tmp_path)

    result: Result = run_cli_in(tmp_path, ["sigils", "--format", "ndjson"])

    assert len(result.stdout.splitlines()) == 5


def test_sigils_colors_unrecognized_levels(tmp_path: Path) -> None:
    """Recognized and unrecognized levels are colored differently."""
    _tree(tmp_path)

    result: Result = run_cli_in(tmp_path, ["--color", "always", "sigils"])

    lines: list[str] = result.stdout.splitlines()
    assert "\x1b[32m" in lines[0]
    assert "\x1b[31m" in lines[3]
