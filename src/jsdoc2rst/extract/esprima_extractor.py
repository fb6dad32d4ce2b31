# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : esprima_extractor.py
#   file_relpath : src/jsdoc2rst/extract/esprima_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment extractor backed by the `esprima` ECMAScript parser.

The whole source is parsed (not merely tokenized) so that syntactically invalid
input is rejected with a `SourceParseError` before anything is emitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import esprima
from esprima.error_handler import Error as EsprimaError

from jsdoc2rst.config.logging import get_logger
from jsdoc2rst.config.model import SourceType
from jsdoc2rst.errors import SourceParseError
from jsdoc2rst.extract.base import CommentKind, CommentRecord

if TYPE_CHECKING:
    from jsdoc2rst.config.logging import Jsdoc2RstLogger

logger: Jsdoc2RstLogger = get_logger(__name__)


def _comment_kind(comment: Any) -> CommentKind:
    # esprima reports "Block" or "Line"
    kind: str = str(getattr(comment, "type", ""))
    return CommentKind.BLOCK if kind.startswith("Block") else CommentKind.LINE


class EsprimaExtractor:
    """Extract comments from JavaScript source with esprima.

    Args:
        source_type (SourceType): Parse the input as a classic script or as an
            ES module (``import``/``export`` allowed).
    """

    def __init__(self, source_type: SourceType = SourceType.SCRIPT) -> None:
        self.source_type = source_type

    def extract_comments(self, text: str) -> list[CommentRecord]:
        """Parse ``text`` and return its comments in source order.

        Raises:
            SourceParseError: If esprima rejects the source.
        """
        module: bool = self.source_type is SourceType.MODULE
        parse = esprima.parseModule if module else esprima.parseScript
        try:
            program: Any = parse(text, {"comment": True})
        except EsprimaError as e:
            raise SourceParseError(
                str(getattr(e, "description", None) or e),
                line=getattr(e, "lineNumber", None),
                column=getattr(e, "column", None),
            ) from e

        comments: list[Any] = list(getattr(program, "comments", None) or [])
        records = [
            CommentRecord(kind=_comment_kind(c), body=str(getattr(c, "value", "")))
            for c in comments
        ]
        logger.debug("esprima reported %d comment(s) (%s)", len(records), self.source_type.value)
        return records
