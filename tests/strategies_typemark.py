# topmark:header:start
#
#   project      : TypeMark
#   file         : strategies_typemark.py
#   file_relpath : tests/strategies_typemark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for type-checker reports and sigil-bearing sources.

These strategies approximate real reports closely enough to exercise the
parser's header/context logic without modelling every message the checker
can print.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from typemark.sigils.strictness import Strictness

Draw = Callable[[st.SearchStrategy[Any]], Any]

s_path: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from("abcxyz_-./\\ @|"), min_size=1, max_size=30
).filter(lambda s: not s[0].isspace())

s_message: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from("abcdefg XYZ`#.,()<>0123456789"), min_size=1, max_size=40
).map(str.strip).filter(bool)

s_context_line: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from(" ^|abc123:"), max_size=30
).map(lambda s: "    " + s)

s_level: st.SearchStrategy[str] = st.sampled_from(Strictness.values())


@st.composite
def s_diagnostic_block(draw: Draw) -> tuple[str, int, int, str, list[str]]:
    """Return ``(file, line, code, message, context)`` for one report block."""
    file: str = draw(s_path)
    line: int = draw(st.integers(min_value=1, max_value=99999))
    code: int = draw(st.integers(min_value=1000, max_value=9999))
    message: str = draw(s_message)
    context: list[str] = draw(st.lists(s_context_line, max_size=4))
    return file, line, code, message, context


def render_block(block: tuple[str, int, int, str, list[str]]) -> str:
    """Render a block the way the checker prints it."""
    file, line, code, message, context = block
    lines: list[str] = [f"{file}:{line}: {message} https://srb.help/{code}", *context]
    return "\n".join(lines) + "\n"


@st.composite
def s_source_with_sigil(draw: Draw) -> tuple[str, str, str]:
    """Return ``(before, level, after)``: a source whose first sigil is ``level``."""
    before_lines: list[str] = draw(
        st.lists(st.sampled_from(["# frozen_string_literal: true", "", "# comment"]), max_size=3)
    )
    after: str = draw(st.text(alphabet=st.sampled_from("abc #:\ntyped"), max_size=60))
    before: str = "".join(f"{line}\n" for line in before_lines)
    return before, draw(s_level), after
