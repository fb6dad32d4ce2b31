# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : errors.py
#   file_relpath : src/jsdoc2rst/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the jsdoc2rst library layer.

These are Click-agnostic; the CLI maps them to `jsdoc2rst.cli.errors`
exceptions carrying exit codes.
"""

from __future__ import annotations


class Jsdoc2RstError(Exception):
    """Base class for all jsdoc2rst errors."""


class SourceParseError(Jsdoc2RstError):
    """The comment extractor rejected the source text.

    Attributes:
        line (int | None): 1-based line of the error, when known.
        column (int | None): 1-based column of the error, when known.
        description (str): Parser description of the problem.
    """

    def __init__(
        self,
        description: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.description = description
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            super().__init__(f"Cannot parse source ({where}): {description}")
        else:
            super().__init__(f"Cannot parse source: {description}")


class ConfigError(Jsdoc2RstError):
    """Invalid configuration file or configuration value."""
