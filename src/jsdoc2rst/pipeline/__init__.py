# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : __init__.py
#   file_relpath : src/jsdoc2rst/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment processing pipeline: the individual steps and the runner chaining them."""

from __future__ import annotations

from jsdoc2rst.pipeline.runner import (
    convert,
    convert_stream,
    process_comment,
    process_comments,
    render_comments,
)

__all__ = [
    "convert",
    "convert_stream",
    "process_comment",
    "process_comments",
    "render_comments",
]
