# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : runner.py
#   file_relpath : src/jsdoc2rst/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the processing steps over a comment stream.

The runner works on fully buffered input: the source text is read in one go,
the extractor produces every comment up front, and blocks are emitted in the
order the extractor reported them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from jsdoc2rst.config.logging import get_logger
from jsdoc2rst.config.model import Config
from jsdoc2rst.extract.esprima_extractor import EsprimaExtractor
from jsdoc2rst.pipeline.steps import (
    dedent_comment_body,
    filter_doc_comments,
    render_block,
    rewrite_directive,
    trim_blank_lines,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jsdoc2rst.config.logging import Jsdoc2RstLogger
    from jsdoc2rst.extract.base import CommentExtractor, CommentRecord

logger: Jsdoc2RstLogger = get_logger(__name__)


def process_comment(comment: CommentRecord, config: Config) -> list[str]:
    """Dedent, trim and rewrite a single documentation comment.

    Returns an empty list when the comment holds nothing but blank lines.
    """
    lines: list[str] = trim_blank_lines(dedent_comment_body(comment.body))
    if not lines:
        return []
    return rewrite_directive(lines, config.prefix)


def process_comments(comments: Iterable[CommentRecord], config: Config) -> list[list[str]]:
    """Return the processed line blocks of all documentation comments.

    Non-documentation comments and blank documentation comments produce no block.
    """
    all_comments: list[CommentRecord] = list(comments)
    doc_comments: list[CommentRecord] = filter_doc_comments(all_comments)
    logger.debug(
        "Kept %d documentation comment(s) out of %d", len(doc_comments), len(all_comments)
    )

    blocks: list[list[str]] = []
    for comment in doc_comments:
        lines: list[str] = process_comment(comment, config)
        if not lines:
            logger.trace("Dropping blank documentation comment: %r", comment.body)
            continue
        logger.trace("Processed block header: %r", lines[0])
        blocks.append(lines)
    return blocks


def render_comments(comments: Iterable[CommentRecord], config: Config) -> str:
    """Render every documentation comment to reStructuredText, in order."""
    return "".join(render_block(block) for block in process_comments(comments, config))


def convert(
    text: str,
    config: Config | None = None,
    extractor: CommentExtractor | None = None,
) -> str:
    """Convert JavaScript source text to reStructuredText.

    Args:
        text (str): The complete source text.
        config (Config | None): Runtime configuration; defaults to `Config()`.
        extractor (CommentExtractor | None): Comment extractor; defaults to
            `EsprimaExtractor` using ``config.source_type``.

    Returns:
        str: The concatenated blocks (empty when nothing qualifies).

    Raises:
        SourceParseError: If the extractor rejects ``text``.
    """
    config = config or Config()
    extractor = extractor or EsprimaExtractor(config.source_type)
    comments = extractor.extract_comments(text)
    return render_comments(comments, config)


def convert_stream(
    stream_in: TextIO,
    stream_out: TextIO,
    config: Config | None = None,
    extractor: CommentExtractor | None = None,
) -> int:
    """Read all of ``stream_in``, write the converted blocks to ``stream_out``.

    Nothing is written if the extractor fails.

    Returns:
        int: The number of blocks written.
    """
    config = config or Config()
    extractor = extractor or EsprimaExtractor(config.source_type)
    text: str = stream_in.read()
    logger.debug("Read %d character(s) of source", len(text))

    blocks: list[list[str]] = process_comments(extractor.extract_comments(text), config)
    for block in blocks:
        stream_out.write(render_block(block))
    stream_out.flush()
    logger.info("Wrote %d documentation block(s)", len(blocks))
    return len(blocks)
