# topmark:header:start
#
#   project      : TypeMark
#   file         : test_group_and_version.py
#   file_relpath : tests/cli/test_group_and_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the command group and the `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize
from typemark.constants import TYPEMARK_VERSION
from typemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_version_outputs_version() -> None:
    """Default `version` prints the installed version exactly."""
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == TYPEMARK_VERSION


@mark_cli
def test_version_verbose() -> None:
    """`-v version` adds a heading."""
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("TypeMark version:")
    assert TYPEMARK_VERSION in result.stdout


@mark_cli
@parametrize("fmt", ["json", "ndjson"])
def test_version_machine_formats(fmt: str) -> None:
    """Machine formats print a JSON object."""
    result: Result = run_cli(["version", "--format", fmt])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": TYPEMARK_VERSION}


@mark_cli
def test_group_without_command_prints_help() -> None:
    """Invoking the group alone prints a hint and the help."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert result.stdout.startswith("Hint: use 'typemark tc'")
    for name in ("bump", "sigils", "tc", "version"):
        assert name in result.stdout


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """`-v` and `-q` together are a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.stderr


@mark_cli
@parametrize("argv", [["-h"], ["--help"], ["tc", "-h"], ["bump", "--help"]])
def test_help_options(argv: list[str]) -> None:
    """Both `-h` and `--help` print usage."""
    result: Result = run_cli(argv)

    assert_SUCCESS(result)
    assert "Usage:" in result.stdout
