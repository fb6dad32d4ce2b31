# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : __init__.py
#   file_relpath : src/jsdoc2rst/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""jsdoc2rst package.

jsdoc2rst extracts ``/** ... */`` documentation comments from JavaScript source
and renders them as Sphinx-ready reStructuredText directive blocks. It exposes
both a CLI and a small typed API (`convert`, `convert_stream`).
"""

from __future__ import annotations

from jsdoc2rst.config.model import Config, SourceType
from jsdoc2rst.errors import ConfigError, Jsdoc2RstError, SourceParseError
from jsdoc2rst.extract.base import CommentKind, CommentRecord
from jsdoc2rst.pipeline.runner import convert, convert_stream

__all__ = [
    "CommentKind",
    "CommentRecord",
    "Config",
    "ConfigError",
    "Jsdoc2RstError",
    "SourceParseError",
    "SourceType",
    "convert",
    "convert_stream",
]
