# topmark:header:start
#
#   project      : TypeMark
#   file         : cmd_common.py
#   file_relpath : src/typemark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the TypeMark commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from typemark.cli.errors import TypemarkConfigError
from typemark.config.logging import get_logger
from typemark.config.model import MutableConfig
from typemark.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typemark.cli.console_api import ConsoleLike
    from typemark.config.logging import TypemarkLogger
    from typemark.config.model import ArgsLike, Config

logger: TypemarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed on the root context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order:
        1. ``Config.verbosity_level`` if set (not None)
        2. ``ctx.obj["verbosity_level"]`` if present
        3. 0 (terse)
    """
    cfg_level: int | None = config.verbosity_level if config is not None else None
    if cfg_level is not None:
        return int(cfg_level)
    return int(ctx.obj.get("verbosity_level", 0)) if isinstance(ctx.obj, dict) else 0


def build_config(
    ctx: click.Context,
    *,
    root: Path,
    no_config: bool = False,
    config_paths: Sequence[str] = (),
    overrides: ArgsLike | None = None,
) -> Config:
    """Resolve the configuration of a command run in ``root``.

    Layers: defaults, then the config files of ``root`` (unless ``no_config``),
    then ``--config`` files in order, then the CLI ``overrides``.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        root=root,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    cli_args: dict[str, object] = {"verbosity_level": ctx.obj.get("verbosity_level")}
    cli_args.update(overrides or {})
    config: Config = draft.apply_cli_args(cli_args).freeze()
    logger.debug("Effective config for %s: %s", root, config)
    return config


def require_project(root: Path, config: Config) -> None:
    """Ensure ``root`` contains the configured project marker.

    Raises:
        TypemarkConfigError: If the marker (e.g. ``sorbet/config``) is missing.
    """
    if not (root / config.project_marker).exists():
        raise TypemarkConfigError(f"not in a Sorbet project (no {config.project_marker})")


def display_path(path: Path | str, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form, for display."""
    return compute_relpath(Path(path), root).as_posix()
