# topmark:header:start
#
#   project      : TypeMark
#   file         : __init__.py
#   file_relpath : src/typemark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeMark subcommands (one module per command)."""
