# topmark:header:start
#
#   project      : TypeMark
#   file         : model.py
#   file_relpath : src/typemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for TypeMark.

Two types cooperate:

- `MutableConfig`: a builder that collects values from the runtime defaults,
  project config files, extra ``--config`` files and CLI overrides, merging them
  with last-wins precedence (``None`` means "not set by this layer").
- `Config`: the immutable runtime snapshot produced by `MutableConfig.freeze`.
  Use `Config.thaw` to obtain a builder for edits.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from typemark.config.io import (
    TomlTable,
    get_string_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from typemark.config.keys import Toml
from typemark.config.logging import TypemarkLogger, get_logger
from typemark.constants import (
    DEFAULT_BUMP_FROM,
    DEFAULT_BUMP_TO,
    DEFAULT_CHECKER_COMMAND,
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_PROJECT_MARKER,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    TYPEMARK_TOML_NAME,
)

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: TypemarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for TypeMark.

    Attributes:
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        verbosity_level (int | None): None = inherit, 0 = terse, 1 = verbose.
        checker_command (tuple[str, ...]): Command that type-checks the project root.
        project_marker (str): Path, relative to the project root, whose presence marks
            a type-checked project (e.g. ``sorbet/config``).
        file_extensions (tuple[str, ...]): Suffixes of the files carrying sigils.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files to leave out.
        bump_from (str): Default source level of ``bump``.
        bump_to (str): Default target level of ``bump``.
    """

    config_files: tuple[Path | str, ...]
    verbosity_level: int | None
    checker_command: tuple[str, ...]
    project_marker: str
    file_extensions: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    bump_from: str
    bump_to: str

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            config_files=list(self.config_files),
            verbosity_level=self.verbosity_level,
            checker_command=list(self.checker_command),
            project_marker=self.project_marker,
            file_extensions=list(self.file_extensions),
            exclude_patterns=list(self.exclude_patterns),
            bump_from=self.bump_from,
            bump_to=self.bump_to,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_CHECKER: {
                Toml.KEY_COMMAND: list(self.checker_command),
                Toml.KEY_PROJECT_MARKER: self.project_marker,
            },
            Toml.SECTION_FILES: {
                Toml.KEY_EXTENSIONS: list(self.file_extensions),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
            Toml.SECTION_BUMP: {
                Toml.KEY_FROM: self.bump_from,
                Toml.KEY_TO: self.bump_to,
            },
        }


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every field defaults to ``None`` (unset) so that merging a layer only overrides
    what that layer actually declares. `freeze` falls back to the built-in defaults
    for anything still unset.
    """

    config_files: list[Path | str] = field(default_factory=lambda: [])
    verbosity_level: int | None = None
    checker_command: list[str] | None = None
    project_marker: str | None = None
    file_extensions: list[str] | None = None
    exclude_patterns: list[str] | None = None
    bump_from: str | None = None
    bump_to: str | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            config_files=tuple(self.config_files),
            verbosity_level=self.verbosity_level,
            checker_command=tuple(
                self.checker_command
                if self.checker_command is not None
                else DEFAULT_CHECKER_COMMAND
            ),
            project_marker=(
                self.project_marker if self.project_marker is not None else DEFAULT_PROJECT_MARKER
            ),
            file_extensions=tuple(
                self.file_extensions
                if self.file_extensions is not None
                else DEFAULT_FILE_EXTENSIONS
            ),
            exclude_patterns=tuple(self.exclude_patterns or ()),
            bump_from=self.bump_from if self.bump_from is not None else DEFAULT_BUMP_FROM,
            bump_to=self.bump_to if self.bump_to is not None else DEFAULT_BUMP_TO,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a draft from a parsed TypeMark TOML table.

        Unknown sections and keys are ignored; values of the wrong type are logged
        and treated as unset.

        Args:
            data (TomlTable): The TypeMark table (``typemark.toml`` root or
                ``[tool.typemark]``).

        Returns:
            MutableConfig: The draft.
        """
        checker: TomlTable = get_table_value(data, Toml.SECTION_CHECKER)
        files: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        bump: TomlTable = get_table_value(data, Toml.SECTION_BUMP)

        extensions: list[str] | None = get_string_list_value_or_none(files, Toml.KEY_EXTENSIONS)
        if extensions is not None:
            extensions = [e if e.startswith(".") else f".{e}" for e in extensions]

        return cls(
            checker_command=get_string_list_value_or_none(checker, Toml.KEY_COMMAND),
            project_marker=get_string_value_or_none(checker, Toml.KEY_PROJECT_MARKER),
            file_extensions=extensions,
            exclude_patterns=get_string_list_value_or_none(files, Toml.KEY_EXCLUDE_PATTERNS),
            bump_from=get_string_value_or_none(bump, Toml.KEY_FROM),
            bump_to=get_string_value_or_none(bump, Toml.KEY_TO),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``typemark.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.typemark]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` if a ``pyproject.toml`` has no
                ``[tool.typemark]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, root: Path) -> list[Path]:
        """Return the config files found in the project ``root``.

        When both are present, ``pyproject.toml`` comes first and ``typemark.toml``
        second so that the latter wins the merge.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, TYPEMARK_TOML_NAME):
            candidate: Path = root / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", root, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        extra_config_files: list[Path] | tuple[Path, ...] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Merge order (lowest to highest precedence):
            1) Built-in defaults
            2) ``pyproject.toml`` then ``typemark.toml`` in ``root`` (unless ``no_config``)
            3) Extra config files, in the order provided

        Args:
            root (Path | None): Project root; defaults to the current directory.
            extra_config_files (list[Path] | tuple[Path, ...]): Explicit config files.
            no_config (bool): Skip project config discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()
        anchor: Path = root if root is not None else Path.cwd()

        layers: list[Path] = [] if no_config else cls.discover_local_config_files(anchor)
        layers.extend(Path(p) for p in extra_config_files)
        for cfg_path in layers:
            layer: MutableConfig | None = cls.from_toml_file(cfg_path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            config_files=[*self.config_files, *other.config_files],
            verbosity_level=pick(self.verbosity_level, other.verbosity_level),
            checker_command=pick(self.checker_command, other.checker_command),
            project_marker=pick(self.project_marker, other.project_marker),
            file_extensions=pick(self.file_extensions, other.file_extensions),
            exclude_patterns=pick(self.exclude_patterns, other.exclude_patterns),
            bump_from=pick(self.bump_from, other.bump_from),
            bump_to=pick(self.bump_to, other.bump_to),
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        Recognized keys: ``verbosity_level``, ``checker_command``, ``bump_from``,
        ``bump_to`` (override) and ``exclude_patterns`` (extends the configured
        patterns). Missing or ``None`` values leave the draft unchanged.
        """
        if args.get("verbosity_level") is not None:
            self.verbosity_level = int(args["verbosity_level"])
        if args.get("checker_command"):
            self.checker_command = list(args["checker_command"])
        if args.get("bump_from") is not None:
            self.bump_from = str(args["bump_from"])
        if args.get("bump_to") is not None:
            self.bump_to = str(args["bump_to"])
        if args.get("exclude_patterns"):
            self.exclude_patterns = [*(self.exclude_patterns or []), *args["exclude_patterns"]]
        return self
