# topmark:header:start
#
#   project      : TypeMark
#   file         : sigils.py
#   file_relpath : src/typemark/cli/commands/sigils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark ``sigils`` command.

Lists the source files of a directory with the raw value of their strictness
sigil (``-`` when a file has none).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from typemark.cli.cmd_common import build_config, display_path, get_console
from typemark.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    directory_argument,
    output_format_option,
)
from typemark.sigils.files import file_strictness, iter_source_files
from typemark.sigils.strictness import is_recognized

if TYPE_CHECKING:
    from typemark.cli.console_api import ConsoleLike
    from typemark.config.model import Config


@click.command(
    name="sigils",
    help="List source files and their strictness sigil.",
    context_settings=CONTEXT_SETTINGS,
)
@directory_argument
@click.option(
    "--strictness",
    "level",
    default=None,
    metavar="LEVEL",
    help="Only list the files whose sigil value is LEVEL.",
)
@common_config_options
@output_format_option
def sigils_command(
    *,
    directory: str,
    level: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """List the files of DIRECTORY with their raw strictness level."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    root: Path = Path(directory).resolve()
    config: Config = build_config(ctx, root=root, no_config=no_config, config_paths=config_paths)

    rows: list[tuple[str, str | None]] = []
    for path in iter_source_files(
        root, extensions=config.file_extensions, exclude_patterns=config.exclude_patterns
    ):
        value: str | None = file_strictness(path)
        if level is not None and value != level:
            continue
        rows.append((display_path(path, root), value))

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([{"file": f, "strictness": v} for f, v in rows], indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for f, v in rows:
            console.print(json.dumps({"file": f, "strictness": v}))
        return

    for f, v in rows:
        if v is None:
            shown: str = console.styled("-", fg="bright_black")
        elif is_recognized(v):
            shown = console.styled(v, fg="green")
        else:
            shown = console.styled(v, fg="red")
        console.print(f"{f}: {shown}")
