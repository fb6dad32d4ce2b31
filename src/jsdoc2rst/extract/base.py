# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : base.py
#   file_relpath : src/jsdoc2rst/extract/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment records and the extractor protocol.

The pipeline never parses source text itself. It consumes the ordered comment
records produced by a `CommentExtractor`, which makes it possible to drive the
pipeline with synthetic comment lists in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


class CommentKind(str, Enum):
    """Kind of a source comment."""

    BLOCK = "block"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class CommentRecord:
    """A single comment reported by an extractor.

    Attributes:
        kind (CommentKind): Block (``/* */``) or line (``//``) comment.
        body (str): Raw text between the comment delimiters.
    """

    kind: CommentKind
    body: str


@runtime_checkable
class CommentExtractor(Protocol):
    """Anything that turns source text into an ordered sequence of comments."""

    def extract_comments(self, text: str) -> Sequence[CommentRecord]:
        """Return the comments of ``text`` in source order.

        Raises:
            SourceParseError: If ``text`` is not valid source.
        """
        ...
