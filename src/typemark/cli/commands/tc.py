# topmark:header:start
#
#   project      : TypeMark
#   file         : tc.py
#   file_relpath : src/typemark/cli/commands/tc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark ``tc`` command.

Runs the type-checker in a project. Without filters the checker's report is
relayed as is. With ``--limit``, ``--code`` or ``--sort`` the report is parsed and
printed one diagnostic per line::

    7004 - errors/errors.rb:10: Wrong number of arguments for constructor.
    Errors: 1 shown, 7 total

The exit status is 0 when the checker succeeds and 1 otherwise.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from typemark.checker.diagnostics import DiagnosticSort, select_diagnostics
from typemark.checker.parser import parse_diagnostics
from typemark.checker.runner import SubprocessChecker
from typemark.cli.cli_types import EnumChoiceParam
from typemark.cli.cmd_common import build_config, get_console, require_project
from typemark.cli.errors import TypemarkCheckerError
from typemark.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    directory_argument,
    output_format_option,
)
from typemark.config.logging import get_logger
from typemark.core.errors import CheckerInvocationError
from typemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from typemark.checker.diagnostics import Diagnostic
    from typemark.checker.runner import CheckerResult
    from typemark.cli.console_api import ConsoleLike
    from typemark.config.logging import TypemarkLogger
    from typemark.config.model import Config

logger: TypemarkLogger = get_logger(__name__)


def colorize_code(console: ConsoleLike, code: int | None) -> str:
    """Return the error code, dimmed."""
    return console.styled(str(code), fg="bright_black")


def colorize_message(console: ConsoleLike, message: str) -> str:
    """Return ``message`` in red with its back-ticked spans in cyan.

    The back-ticks themselves are dropped when color is on and kept otherwise.
    """
    if not console.enable_color:
        return message
    parts: list[str] = message.split("`")
    return "".join(
        console.styled(part, fg="cyan" if i % 2 else "red") for i, part in enumerate(parts) if part
    )


def format_diagnostic(console: ConsoleLike, diag: Diagnostic) -> str:
    """Return ``<code> - <file>:<line>: <message>``."""
    code: str = colorize_code(console, diag.code)
    return f"{code} - {diag.location}: {colorize_message(console, diag.message)}"


def errors_summary(shown: int, total: int) -> str:
    """Return the ``Errors:`` trailer line."""
    if shown == total:
        return f"Errors: {total}"
    return f"Errors: {shown} shown, {total} total"


@click.command(
    name="tc",
    help="Run the type-checker and report its diagnostics.",
    context_settings=CONTEXT_SETTINGS,
)
@directory_argument
@click.option(
    "-l",
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Show at most this many diagnostics.",
)
@click.option(
    "-c",
    "--code",
    type=int,
    default=None,
    help="Show only the diagnostics with this error code.",
)
@click.option(
    "-s",
    "--sort",
    "sort",
    type=EnumChoiceParam(DiagnosticSort),
    is_flag=False,
    flag_value=DiagnosticSort.NATURAL.value,
    default=None,
    help="Sort diagnostics: default (file, line) or code.",
)
@common_config_options
@output_format_option
def tc_command(
    *,
    directory: str,
    limit: int | None,
    code: int | None,
    sort: DiagnosticSort | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Run the type-checker in DIRECTORY.

    Exit Status:
      SUCCESS (0): The checker reported no error.
      FAILURE (1): The checker reported errors.
      CHECKER_ERROR (69): The checker could not run.
      CONFIG_ERROR (78): DIRECTORY is not a type-checked project.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    root: Path = Path(directory).resolve()
    config: Config = build_config(ctx, root=root, no_config=no_config, config_paths=config_paths)
    require_project(root, config)

    try:
        result: CheckerResult = SubprocessChecker(config.checker_command)(root)
    except CheckerInvocationError as exc:
        raise TypemarkCheckerError(str(exc)) from exc
    status: ExitCode = ExitCode.SUCCESS if result.success else ExitCode.FAILURE

    filtered: bool = limit is not None or code is not None or sort is not None
    if fmt == OutputFormat.DEFAULT and (result.success or not filtered):
        console.print(result.output, nl=False)
        ctx.exit(status)

    diagnostics: list[Diagnostic] = parse_diagnostics(result.output)
    shown: list[Diagnostic] = select_diagnostics(diagnostics, sort=sort, code=code, limit=limit)

    if fmt == OutputFormat.JSON:
        payload: dict[str, object] = {
            "success": result.success,
            "total": len(diagnostics),
            "shown": len(shown),
            "diagnostics": [d.to_dict() for d in shown],
        }
        console.print(json.dumps(payload, indent=2))
    elif fmt == OutputFormat.NDJSON:
        for diag in shown:
            console.print(json.dumps(diag.to_dict()))
    else:
        for diag in shown:
            console.print(format_diagnostic(console, diag))
        console.print(errors_summary(len(shown), len(diagnostics)))

    ctx.exit(status)
