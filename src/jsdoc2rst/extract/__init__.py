# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : __init__.py
#   file_relpath : src/jsdoc2rst/extract/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment extraction: the records the pipeline consumes and their producers."""

from __future__ import annotations

from jsdoc2rst.extract.base import CommentExtractor, CommentKind, CommentRecord
from jsdoc2rst.extract.esprima_extractor import EsprimaExtractor

__all__ = [
    "CommentExtractor",
    "CommentKind",
    "CommentRecord",
    "EsprimaExtractor",
]
