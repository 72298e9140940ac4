# topmark:header:start
#
#   project      : TypeMark
#   file         : console_api.py
#   file_relpath : src/typemark/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console protocol used by the TypeMark commands.

Commands write their results (relayed checker reports, diagnostic lines, bump
outcomes, JSON documents) through a `ConsoleLike`, never through `logging`, so
that log records on stderr cannot corrupt what a script reads from stdout.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs from a console.

    Attributes:
        enable_color (bool): Whether `styled` emits ANSI codes. Renderers also
            consult it to pick a plain-text fallback (e.g. keeping back-ticks
            around code spans in ``tc`` output).
    """

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with `click.style` options applied, or unchanged without color."""
        ...
