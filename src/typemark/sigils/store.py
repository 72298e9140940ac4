# topmark:header:start
#
#   project      : TypeMark
#   file         : store.py
#   file_relpath : src/typemark/sigils/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read, validate and rewrite the strictness sigil of a unit of text.

A sigil is a comment line of the form ``# typed: <level>``. Only the *first*
sigil line of the content is authoritative; later sigil-looking lines are
inert and are preserved verbatim when the sigil is rewritten.

The functions in this module are pure: they operate on file *content* and never
touch the filesystem. See `typemark.sigils.files` for the file-scoped helpers.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from typemark.config.logging import get_logger
from typemark.constants import SIGIL_PREFIX
from typemark.core.errors import MarkerNotFoundError
from typemark.sigils.strictness import is_recognized

if TYPE_CHECKING:
    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)

# Whole sigil line, without its line terminator.
SIGIL_RE: Final[re.Pattern[str]] = re.compile(
    r"^#[ \t]*typed[ \t]*:(?P<value>[^\r\n]*)",
    re.MULTILINE,
)


def sigil_string(level: str) -> str:
    """Return the canonical sigil line for ``level``.

    Any string is accepted; an empty ``level`` yields a bare ``"# typed: "``.
    """
    return f"{SIGIL_PREFIX} {level}"


def strictness(content: str) -> str | None:
    """Return the trimmed value of the first sigil in ``content``.

    The value is returned whether or not it is a recognized level.

    Returns:
        str | None: The raw level, or ``None`` if the content has no sigil.
    """
    m: re.Match[str] | None = SIGIL_RE.search(content)
    if m is None:
        return None
    return m.group("value").strip()


def is_valid_strictness(content: str) -> bool:
    """Return True if ``content`` has a sigil holding a recognized level."""
    return is_recognized(strictness(content))


def update_sigil(content: str, level: str) -> str:
    """Return ``content`` with its first sigil line set to ``level``.

    Every other line, including later sigil-looking lines and the original line
    terminators, is left untouched.

    Raises:
        MarkerNotFoundError: If ``content`` has no sigil line.
    """
    m: re.Match[str] | None = SIGIL_RE.search(content)
    if m is None:
        raise MarkerNotFoundError()
    logger.trace("Rewriting sigil %r -> %r", m.group(0), level)
    return f"{content[: m.start()]}{sigil_string(level)}{content[m.end() :]}"
