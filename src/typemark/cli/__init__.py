# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for TypeMark.

The CLI is a thin layer over the library: it resolves configuration, runs the
requested operation and renders the outcome through a `ClickConsole`. Library
exceptions are mapped to [`TypemarkCliError`][typemark.cli.errors.TypemarkCliError]
subclasses carrying sysexits-style exit codes.
"""
