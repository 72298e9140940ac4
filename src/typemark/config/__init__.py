# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for the TypeMark tool.

Configuration is read from ``typemark.toml`` or the ``[tool.typemark]`` table of
``pyproject.toml`` in the project root, merged over runtime defaults, and frozen
into an immutable `Config`.
"""

from __future__ import annotations

from typemark.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
