# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : exit_codes.py
#   file_relpath : src/jsdoc2rst/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the jsdoc2rst CLI.

The values follow the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the jsdoc2rst CLI.

    Attributes:
        SUCCESS: The input was converted and written.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        PARSE_ERROR: The source text could not be parsed, or could not be
            decoded. Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: I/O error reading the input or writing the output. Mirrors
            BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
