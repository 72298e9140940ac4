# topmark:header:start
#
#   project      : TypeMark
#   file         : io.py
#   file_relpath : src/typemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters never raise: values of the wrong type are logged and treated as unset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from typemark.config.keys import Toml
from typemark.config.logging import get_logger
from typemark.constants import (
    DEFAULT_BUMP_FROM,
    DEFAULT_BUMP_TO,
    DEFAULT_CHECKER_COMMAND,
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_PROJECT_MARKER,
)

if TYPE_CHECKING:
    from pathlib import Path

    from typemark.config.logging import TypemarkLogger

TomlTable = dict[str, Any]

logger: TypemarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return TypeMark's **runtime defaults** as a Python dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.
    """
    return {
        Toml.SECTION_CHECKER: {
            Toml.KEY_COMMAND: list(DEFAULT_CHECKER_COMMAND),
            Toml.KEY_PROJECT_MARKER: DEFAULT_PROJECT_MARKER,
        },
        Toml.SECTION_FILES: {
            Toml.KEY_EXTENSIONS: list(DEFAULT_FILE_EXTENSIONS),
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
        Toml.SECTION_BUMP: {
            Toml.KEY_FROM: DEFAULT_BUMP_FROM,
            Toml.KEY_TO: DEFAULT_BUMP_TO,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``typemark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``table[key]``, or an empty dict if absent or not a table."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Expected [%s] to be a table, got %s; ignored", key, type(value).__name__)
        return {}
    return cast("TomlTable", value)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected '%s' to be a string, got %r; ignored", key, value)
    return None


def get_string_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Returns:
        list[str] | None: The list, or ``None`` when absent or not a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    logger.warning("Expected '%s' to be a list of strings, got %r; ignored", key, value)
    return None
