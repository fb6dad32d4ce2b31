# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : constants.py
#   file_relpath : src/jsdoc2rst/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module-level constants for jsdoc2rst.

Defines the documentation-comment conventions and the layout of the emitted
reStructuredText blocks.
"""

from __future__ import annotations

import re
from importlib.metadata import version as get_version
from typing import Final

PROJECT_NAME: Final[str] = "jsdoc2rst"

JSDOC2RST_VERSION: str = get_version(PROJECT_NAME)

#: Marker character opening a documentation comment (``/**``) and starting
#: continuation lines (`` * text``).
DOC_MARKER: Final[str] = "*"

#: Prepended to the first body line so it measures like a `` * `` continuation line.
FIRST_LINE_PAD: Final[str] = DOC_MARKER * 2

#: Leading run of markers/whitespace followed by the first content character.
INDENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([\s*]*)[^\s*]")

#: Sphinx directive line: ``label::`` optionally followed by an identifier.
DIRECTIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([a-z:]+::)(.*)")

#: Newline styles recognized when splitting a comment body.
NEWLINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\r?\n")

#: Explicit markup start for the header line of each emitted block.
BLOCK_HEADER: Final[str] = "..  "

#: Indentation of the continuation lines of each emitted block.
CONTINUATION_INDENT: Final[str] = " " * 4

#: Written after every block to separate it from the next one.
BLOCK_SEPARATOR: Final[str] = "\n\n"

#: Section of ``pyproject.toml`` holding the jsdoc2rst settings.
PYPROJECT_TOOL_SECTION: Final[str] = "jsdoc2rst"
