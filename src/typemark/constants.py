# topmark:header:start
#
#   project      : TypeMark
#   file         : constants.py
#   file_relpath : src/typemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TYPEMARK_VERSION: str = get_version("typemark")

# Config file names looked up in the project root:
TYPEMARK_TOML_NAME: Final[str] = "typemark.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "typemark"

# Strictness sigil, e.g. ``# typed: strict``
SIGIL_PREFIX: Final[str] = "# typed:"

# Default checker invocation (run from the project root)
DEFAULT_CHECKER_COMMAND: Final[tuple[str, ...]] = ("bundle", "exec", "srb", "tc")
DEFAULT_PROJECT_MARKER: Final[str] = "sorbet/config"
DEFAULT_FILE_EXTENSIONS: Final[tuple[str, ...]] = (".rb",)

DEFAULT_BUMP_FROM: Final[str] = "false"
DEFAULT_BUMP_TO: Final[str] = "true"

# Suffix of the sidecar file used to lock a single file while its sigil is rewritten
SIGIL_LOCK_SUFFIX: Final[str] = ".typemark-lock"
