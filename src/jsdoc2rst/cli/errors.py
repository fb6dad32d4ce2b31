# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : errors.py
#   file_relpath : src/jsdoc2rst/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the jsdoc2rst CLI.

Usage:
    Raise these exceptions in the command to signal errors with standardized
    messages and exit codes. Click prints the message to ``stderr`` and exits
    with the exception's ``exit_code``.
"""

from __future__ import annotations

import click

from jsdoc2rst.cli.exit_codes import ExitCode


class Jsdoc2RstCliError(click.ClickException):
    """Base class for all jsdoc2rst CLI errors."""

    exit_code = ExitCode.FAILURE


class Jsdoc2RstUsageError(Jsdoc2RstCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class Jsdoc2RstParseError(Jsdoc2RstCliError):
    """Error for source text the comment extractor cannot parse."""

    exit_code = ExitCode.PARSE_ERROR


class Jsdoc2RstEncodingError(Jsdoc2RstCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.PARSE_ERROR


class Jsdoc2RstIOError(Jsdoc2RstCliError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class Jsdoc2RstConfigError(Jsdoc2RstCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
