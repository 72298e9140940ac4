# topmark:header:start
#
#   project      : TypeMark
#   file         : strictness.py
#   file_relpath : src/typemark/sigils/strictness.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The closed vocabulary of recognized strictness levels."""

from __future__ import annotations

from enum import Enum

from typemark.core.errors import InvalidLevelError


class Strictness(str, Enum):
    """Recognized strictness levels, from the most permissive to the strictest."""

    IGNORE = "ignore"
    FALSE = "false"
    TRUE = "true"
    STRICT = "strict"
    STRONG = "strong"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return the level names in order."""
        return tuple(s.value for s in cls)


def is_recognized(level: str | None) -> bool:
    """Return True if ``level`` is one of the recognized levels (case-sensitive)."""
    return level is not None and level in Strictness.values()


def validate_level(level: str) -> Strictness:
    """Return the `Strictness` for ``level``.

    Raises:
        InvalidLevelError: If ``level`` is not recognized.
    """
    if not is_recognized(level):
        raise InvalidLevelError(level)
    return Strictness(level)
