# topmark:header:start
#
#   project      : TypeMark
#   file         : main.py
#   file_relpath : src/typemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the TypeMark CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from typemark.cli.commands.bump import bump_command
from typemark.cli.commands.sigils import sigils_command
from typemark.cli.commands.tc import tc_command
from typemark.cli.commands.version import version_command
from typemark.cli.console import ClickConsole
from typemark.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from typemark.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from typemark.cli.console_api import ConsoleLike
    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # TYPEMARK_LOG_LEVEL wins over -v/-q for internal logging
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)
    logger.debug("Log level set to %s", logging.getLevelName(log_level))

    # Program-output verbosity: 0 = terse, 1 = verbose
    ctx.obj["verbosity_level"] = 1 if verbose > 0 else 0

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="TypeMark: raise the type strictness of a codebase, one sigil at a time.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TypeMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'typemark tc' to type-check or 'typemark bump' to raise sigils.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(tc_command)

cli.add_command(bump_command)

cli.add_command(sigils_command)

if __name__ == "__main__":
    cli()
