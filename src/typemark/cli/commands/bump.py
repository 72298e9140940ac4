# topmark:header:start
#
#   project      : TypeMark
#   file         : bump.py
#   file_relpath : src/typemark/cli/commands/bump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark ``bump`` command.

Raises the strictness sigil of every file at ``--from`` to ``--to``, runs the
type-checker once, and puts back the files the checker complains about.

Examples:

    $ typemark bump
    $ typemark bump path/to/project --from true --to strict
    $ typemark bump --format json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from typemark.bump.model import BumpState
from typemark.bump.orchestrator import bump
from typemark.checker.runner import SubprocessChecker
from typemark.cli.cmd_common import (
    build_config,
    display_path,
    get_console,
    get_effective_verbosity,
    require_project,
)
from typemark.cli.errors import TypemarkCheckerError, TypemarkIOError, TypemarkUsageError
from typemark.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    directory_argument,
    output_format_option,
)
from typemark.config.logging import get_logger
from typemark.core.errors import InvalidLevelError
from typemark.sigils.strictness import Strictness

if TYPE_CHECKING:
    from typemark.bump.model import BumpResult
    from typemark.cli.console_api import ConsoleLike
    from typemark.config.logging import TypemarkLogger
    from typemark.config.model import Config

logger: TypemarkLogger = get_logger(__name__)

LEVEL_HELP: str = ", ".join(Strictness.values())


def render_bump_result(
    console: ConsoleLike,
    result: BumpResult,
    *,
    root: Path,
    verbosity: int = 0,
) -> None:
    """Render a bump outcome for humans."""
    for path in result.promoted:
        console.print(
            f"{console.styled('promoted', fg='green')} {display_path(path, root)}"
            f" ({result.source_level} -> {result.target_level})"
        )
    for path in result.reverted:
        console.print(
            f"{console.styled('reverted', fg='yellow')} {display_path(path, root)}"
            f" (kept at {result.source_level})"
        )
    for path in result.skipped:
        console.print(f"{console.styled('skipped', fg='bright_black')} {display_path(path, root)}")
    for path, reason in result.failed.items():
        console.print(f"{console.styled('failed', fg='red')} {display_path(path, root)}: {reason}")

    if verbosity > 0:
        for diag in result.diagnostics:
            console.print(f"  {diag.code} - {diag.location}: {diag.message}")

    console.print(
        f"Bumped {len(result.promoted)} file(s) from {result.source_level} to "
        f"{result.target_level}, reverted {len(result.reverted)}."
    )


@click.command(
    name="bump",
    help="Bump strictness sigils from --from to --to when the type-checker agrees.",
    context_settings=CONTEXT_SETTINGS,
)
@directory_argument
@click.option(
    "--from",
    "source_level",
    default=None,
    metavar="LEVEL",
    help=f"Level of the files to bump ({LEVEL_HELP}). Default: false.",
)
@click.option(
    "--to",
    "target_level",
    default=None,
    metavar="LEVEL",
    help=f"Level to bump them to ({LEVEL_HELP}). Default: true.",
)
@common_config_options
@output_format_option
def bump_command(
    *,
    directory: str,
    source_level: str | None,
    target_level: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Run the bump workflow in DIRECTORY.

    Exit Status:
      SUCCESS (0): The bump was reconciled (reverted files are not an error).
      USAGE_ERROR (64): ``--from`` or ``--to`` is not a recognized level.
      CHECKER_ERROR (69): The type-checker could not run; every file was put back.
      IO_ERROR (74): Some files could not be rewritten or restored.
      CONFIG_ERROR (78): DIRECTORY is not a type-checked project.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    root: Path = Path(directory).resolve()
    config: Config = build_config(
        ctx,
        root=root,
        no_config=no_config,
        config_paths=config_paths,
        overrides={"bump_from": source_level, "bump_to": target_level},
    )
    require_project(root, config)

    try:
        result: BumpResult = bump(
            root,
            config.bump_from,
            config.bump_to,
            checker=SubprocessChecker(config.checker_command),
            config=config,
        )
    except InvalidLevelError as exc:
        raise TypemarkUsageError(f"{exc} (expected one of: {LEVEL_HELP})") from exc

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(result.to_dict(), indent=2))
    elif fmt == OutputFormat.NDJSON:
        console.print(json.dumps(result.to_dict()))
    else:
        render_bump_result(
            console, result, root=root, verbosity=get_effective_verbosity(ctx, config)
        )

    if result.state == BumpState.INFRA_FAILED:
        raise TypemarkCheckerError(result.error or "the type-checker could not run")
    if result.failed:
        raise TypemarkIOError(f"{len(result.failed)} file(s) could not be rewritten")
