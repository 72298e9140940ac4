# topmark:header:start
#
#   project      : TypeMark
#   file         : test_diagnostics.py
#   file_relpath : tests/checker/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Diagnostic` record and the sort/select helpers."""

from __future__ import annotations

import pytest

from typemark.checker.diagnostics import (
    Diagnostic,
    DiagnosticSort,
    select_diagnostics,
    sort_diagnostics,
)


def diag(file: str, line: int, code: int, message: str = "m") -> Diagnostic:
    return Diagnostic(file=file, line=line, code=code, message=message)


EMITTED: list[Diagnostic] = [
    diag("z.rb", 80, 2001),
    diag("b.rb", 100, 4010),
    diag("b.rb", 28, 7004),
    diag("a.rb", 105, 7003),
]


def test_natural_order_is_file_then_numeric_line() -> None:
    assert [d.code for d in sorted(EMITTED)] == [7003, 7004, 4010, 2001]
    assert [d.code for d in sort_diagnostics(EMITTED)] == [7003, 7004, 4010, 2001]


def test_sort_by_code_breaks_ties_with_natural_order() -> None:
    diagnostics: list[Diagnostic] = [
        diag("errors.rb", 11, 7003, "c"),
        diag("errors.rb", 5, 7003, "sig"),
        diag("errors.rb", 5, 5002, "Bar"),
        diag("errors.rb", 5, 7003, "params"),
    ]

    result: list[Diagnostic] = sort_diagnostics(diagnostics, DiagnosticSort.CODE)

    assert [(d.code, d.line, d.message) for d in result] == [
        (5002, 5, "Bar"),
        (7003, 5, "sig"),
        (7003, 5, "params"),
        (7003, 11, "c"),
    ]


def test_sorting_does_not_mutate_input() -> None:
    emitted: list[Diagnostic] = list(EMITTED)

    sort_diagnostics(emitted, DiagnosticSort.CODE)

    assert emitted == EMITTED


def test_select_filters_by_code_after_sorting() -> None:
    result: list[Diagnostic] = select_diagnostics(EMITTED, code=4010)

    assert result == [diag("b.rb", 100, 4010)]


def test_select_truncates_last() -> None:
    result: list[Diagnostic] = select_diagnostics(EMITTED, sort=DiagnosticSort.CODE, limit=2)

    assert [d.code for d in result] == [2001, 4010]


def test_select_with_zero_limit_is_empty() -> None:
    assert select_diagnostics(EMITTED, limit=0) == []


def test_code_requires_location() -> None:
    with pytest.raises(ValueError):
        Diagnostic(file=None, line=None, code=7003, message="orphan")


def test_diagnostic_is_immutable() -> None:
    d: Diagnostic = diag("a.rb", 1, 2001)

    with pytest.raises(AttributeError):
        d.line = 2  # type: ignore[misc]


def test_location_and_to_dict() -> None:
    d = Diagnostic(file="a.rb", line=3, code=7003, message="m", context=("  x",))

    assert d.location == "a.rb:3"
    assert d.to_dict() == {
        "file": "a.rb",
        "line": 3,
        "code": 7003,
        "message": "m",
        "context": ["  x"],
    }
