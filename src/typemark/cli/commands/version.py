# topmark:header:start
#
#   project      : TypeMark
#   file         : version.py
#   file_relpath : src/typemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark ``version`` command.

Prints the TypeMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from typemark.cli.cmd_common import get_console, get_effective_verbosity
from typemark.cli.options import OutputFormat, output_format_option
from typemark.constants import TYPEMARK_VERSION

if TYPE_CHECKING:
    from typemark.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TypeMark.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TypeMark.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt.is_machine:
        console.print(json.dumps({"version": TYPEMARK_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("TypeMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TYPEMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(TYPEMARK_VERSION, bold=True))
