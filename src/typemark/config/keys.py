# topmark:header:start
#
#   project      : TypeMark
#   file         : keys.py
#   file_relpath : src/typemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for TypeMark configuration.

This module defines the authoritative string constants used when reading
TypeMark configuration from TOML sources (``typemark.toml`` and
``[tool.typemark]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TypeMark configuration.

    Example:
        ```toml
        [checker]
        command = ["bundle", "exec", "srb", "tc"]
        project_marker = "sorbet/config"

        [files]
        extensions = [".rb"]
        exclude_patterns = ["vendor/"]

        [bump]
        from = "false"
        to = "true"
        ```
    """

    # [checker]
    SECTION_CHECKER: Final[str] = "checker"

    KEY_COMMAND: Final[str] = "command"
    KEY_PROJECT_MARKER: Final[str] = "project_marker"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # [bump]
    SECTION_BUMP: Final[str] = "bump"

    KEY_FROM: Final[str] = "from"
    KEY_TO: Final[str] = "to"
