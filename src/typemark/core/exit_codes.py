# topmark:header:start
#
#   project      : TypeMark
#   file         : exit_codes.py
#   file_relpath : src/typemark/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for TypeMark CLI.

TypeMark aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. ``FAILURE=1`` doubles as the "type errors were
reported" result of ``typemark tc``, mirroring the checker's own exit status.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for TypeMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, or the checker reported type errors.
        USAGE_ERROR: Command-line invocation error (invalid flags/args or strictness
            levels). Mirrors BSD ``EX_USAGE (64)``.
        CHECKER_ERROR: The external type-checker could not be run. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (not in a project, malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    CHECKER_ERROR = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
