# topmark:header:start
#
#   project      : TypeMark
#   file         : test_parser_properties.py
#   file_relpath : tests/checker/test_parser_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for the diagnostic parser.

1) The parser is total: any text parses without raising.
2) Rendered header blocks parse back to their location, code and message, in
   emission order.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies_typemark import render_block, s_diagnostic_block
from typemark.checker.diagnostics import Diagnostic
from typemark.checker.parser import parse_diagnostics

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=300, deadline=None)
@given(text=st.text())
def test_parser_is_total(text: str) -> None:
    diagnostics: list[Diagnostic] = parse_diagnostics(text)

    for diag in diagnostics:
        assert diag.code is not None
        assert diag.file
        assert diag.line is not None and diag.line >= 0


@settings(max_examples=100, deadline=None)
@given(blocks=st.lists(s_diagnostic_block(), min_size=1, max_size=5))
def test_rendered_blocks_parse_in_order(
    blocks: list[tuple[str, int, int, str, list[str]]],
) -> None:
    text: str = "".join(render_block(b) for b in blocks)

    diagnostics: list[Diagnostic] = parse_diagnostics(text)

    assert [(d.line, d.code) for d in diagnostics] == [(b[1], b[2]) for b in blocks]
    assert [d.message for d in diagnostics] == [b[3] for b in blocks]
