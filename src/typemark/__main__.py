# topmark:header:start
#
#   project      : TypeMark
#   file         : __main__.py
#   file_relpath : src/typemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TypeMark via ``python -m typemark``.

It delegates directly to :func:`typemark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how TypeMark is launched.

Examples:
    Bump every ``typed: false`` file of the current project::

        python -m typemark bump .
"""

from __future__ import annotations

from typemark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
