# topmark:header:start
#
#   project      : TypeMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TypeMark test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small builders shared by the test packages.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `typemark.config.MutableConfig`, then `freeze()` them into a
    `typemark.config.Config` before handing them to the library.
"""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from typemark.config import MutableConfig, logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typemark.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_typemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TypeMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    config.addinivalue_line("markers", "cli: tests that drive the Click CLI")
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attributes set on the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def write_source(root: Path, relpath: str, level: str | None, body: str = "class A; end\n") -> Path:
    """Create a Ruby source file under ``root``, with a sigil unless ``level`` is None."""
    path: Path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    sigil: str = f"# typed: {level}\n" if level is not None else ""
    path.write_text(sigil + body, encoding="utf-8")
    return path


def write_checker_script(directory: Path, output: str, *, exit_code: int = 1) -> Path:
    """Write a Python script that prints ``output`` and exits with ``exit_code``.

    The script stands in for the real type-checker in tests that run the
    `SubprocessChecker` for real.
    """
    script: Path = directory / "fake_checker.py"
    script.write_text(
        textwrap.dedent(
            f"""\
            import sys
            sys.stderr.write({output!r})
            sys.exit({exit_code})
            """
        ),
        encoding="utf-8",
    )
    return script


def checker_command(script: Path) -> list[str]:
    """Return the command running ``script`` with the current interpreter."""
    return [sys.executable, str(script)]


def write_project(
    root: Path,
    *,
    command: Sequence[str] | None = None,
    marker: bool = True,
) -> Path:
    """Turn ``root`` into a minimal project: a ``sorbet/config`` and a ``typemark.toml``."""
    if marker:
        (root / "sorbet").mkdir(parents=True, exist_ok=True)
        (root / "sorbet" / "config").write_text(".\n", encoding="utf-8")
    if command is not None:
        quoted: str = ", ".join(f"'{c}'" for c in command)
        (root / "typemark.toml").write_text(
            f"[checker]\ncommand = [{quoted}]\n",
            encoding="utf-8",
        )
    return root
