# topmark:header:start
#
#   project      : TypeMark
#   file         : test_runner.py
#   file_relpath : tests/checker/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `SubprocessChecker`, using small Python scripts as the checker."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.conftest import write_checker_script
from typemark.checker.runner import CheckerResult, SubprocessChecker
from typemark.core.errors import CheckerInvocationError


def test_failing_run_is_a_result_not_an_error(tmp_path: Path) -> None:
    script: Path = write_checker_script(tmp_path, "a.rb:1: bad https://srb.help/2001\n")

    result: CheckerResult = SubprocessChecker([sys.executable, str(script)])(tmp_path)

    assert result.success is False
    assert "a.rb:1: bad" in result.output


def test_stderr_is_merged_into_output(tmp_path: Path) -> None:
    script: Path = write_checker_script(tmp_path, "No errors! Great job.\n", exit_code=0)

    result: CheckerResult = SubprocessChecker([sys.executable, str(script)])(tmp_path)

    assert result == CheckerResult(output="No errors! Great job.\n", success=True)


def test_runs_in_project_root(tmp_path: Path) -> None:
    result: CheckerResult = SubprocessChecker(
        [sys.executable, "-c", "import os; print(os.getcwd())"]
    )(tmp_path)

    assert result.success
    assert Path(result.output.strip()).resolve() == tmp_path.resolve()


def test_extra_args_are_appended(tmp_path: Path) -> None:
    checker = SubprocessChecker(
        [sys.executable, "-c", "import sys; print(sys.argv[1:])"], extra_args=["--x"]
    )

    result: CheckerResult = checker(tmp_path)

    assert result.output.strip() == "['--x']"


def test_missing_executable_raises(tmp_path: Path) -> None:
    checker = SubprocessChecker([str(tmp_path / "no-such-checker")])

    with pytest.raises(CheckerInvocationError) as excinfo:
        checker(tmp_path)

    assert excinfo.value.command == (str(tmp_path / "no-such-checker"),)


def test_empty_command_raises(tmp_path: Path) -> None:
    with pytest.raises(CheckerInvocationError):
        SubprocessChecker(())(tmp_path)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
def test_killed_process_raises(tmp_path: Path) -> None:
    checker = SubprocessChecker(
        [sys.executable, "-c", "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"]
    )

    with pytest.raises(CheckerInvocationError, match="signal"):
        checker(tmp_path)
