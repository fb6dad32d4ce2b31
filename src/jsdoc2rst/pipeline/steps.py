# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : steps.py
#   file_relpath : src/jsdoc2rst/pipeline/steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure processing steps applied to each documentation comment.

Each step takes a list of lines (or comment records) and returns a new list;
none of them mutates its input. The order in which the runner applies them is:

filter -> dedent -> trim -> rewrite -> render

Layout example (``prefix="pkg"``):

/**
 * function:: foo()
 *
 * Does a thing.
 */

becomes::

    ..  function:: pkg.foo()

        Does a thing.

(the blank line keeps its four-space indent).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsdoc2rst.constants import (
    BLOCK_HEADER,
    BLOCK_SEPARATOR,
    CONTINUATION_INDENT,
    DIRECTIVE_PATTERN,
    DOC_MARKER,
    FIRST_LINE_PAD,
    INDENT_PATTERN,
    NEWLINE_PATTERN,
)
from jsdoc2rst.extract.base import CommentKind

if TYPE_CHECKING:
    import re
    from collections.abc import Iterable, Sequence

    from jsdoc2rst.extract.base import CommentRecord


def is_doc_comment(comment: CommentRecord) -> bool:
    """Return True for block comments opened with ``/**``."""
    return comment.kind is CommentKind.BLOCK and comment.body.startswith(DOC_MARKER)


def filter_doc_comments(comments: Iterable[CommentRecord]) -> list[CommentRecord]:
    """Keep documentation comments only, in their original order."""
    return [c for c in comments if is_doc_comment(c)]


def split_lines(body: str) -> list[str]:
    """Split a comment body on ``\\n`` or ``\\r\\n``.

    Unlike `str.splitlines`, every segment is kept, including a trailing
    empty one, and no other line separators are recognized.
    """
    return NEWLINE_PATTERN.split(body)


def indent_width(line: str) -> int | None:
    """Return the length of the marker/whitespace prefix of ``line``.

    Returns ``None`` when the line holds nothing but markers and whitespace.
    """
    match: re.Match[str] | None = INDENT_PATTERN.match(line)
    if match is None:
        return None
    return len(match.group(1))


def dedent_lines(lines: Sequence[str]) -> list[str]:
    """Remove the common marker/whitespace prefix from every line.

    The trim width is the smallest prefix among lines that have content;
    lines without content do not constrain it. Exactly that many characters
    are cut from every line, so shorter lines become empty. A block without
    any content line comes back as empty lines.
    """
    widths: list[int] = [w for w in (indent_width(line) for line in lines) if w is not None]
    if not widths:
        return ["" for _ in lines]
    trim: int = min(widths)
    return [line[trim:] for line in lines]


def dedent_comment_body(body: str) -> list[str]:
    """Split a documentation comment body and dedent it.

    The first line is padded with two markers so that it measures like the
    `` * `` continuation lines that follow it.
    """
    lines: list[str] = split_lines(body)
    lines[0] = FIRST_LINE_PAD + lines[0]
    return dedent_lines(lines)


def trim_blank_lines(lines: Sequence[str]) -> list[str]:
    """Drop whitespace-only lines from both ends; interior blanks are kept."""
    start: int = 0
    end: int = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return list(lines[start:end])


def rewrite_directive_line(line: str, prefix: str) -> str:
    """Qualify the identifier of a directive line with ``prefix``.

    ``function:: foo(bar)`` becomes ``function:: <prefix>.foo(bar)``, a bare
    ``function::`` becomes ``function:: <prefix>``. Lines that are not
    directives are returned unchanged.
    """
    match: re.Match[str] | None = DIRECTIVE_PATTERN.match(line)
    if match is None:
        return line
    directive, remainder = match.group(1), match.group(2).strip()
    rewritten: str = f"{directive} {prefix}"
    if remainder:
        rewritten += f".{remainder}"
    return rewritten


def rewrite_directive(lines: Sequence[str], prefix: str | None) -> list[str]:
    """Apply `rewrite_directive_line` to the first line of a block.

    With no prefix, or an empty block, the lines are returned as they are.
    """
    out: list[str] = list(lines)
    if prefix and out:
        out[0] = rewrite_directive_line(out[0], prefix)
    return out


def render_block(lines: Sequence[str]) -> str:
    """Render a processed, non-empty block as reStructuredText.

    The first line follows the ``..  `` header; every other line is indented by
    four spaces and the block ends with two blank lines. A header-only block
    has no continuation section at all (no empty indented line is written).

    Raises:
        ValueError: If ``lines`` is empty; empty blocks must be dropped upstream.
    """
    if not lines:
        raise ValueError("Cannot render an empty block")
    parts: list[str] = [f"{BLOCK_HEADER}{lines[0]}\n"]
    rest: Sequence[str] = lines[1:]
    if rest:
        parts.append("\n".join(f"{CONTINUATION_INDENT}{line}" for line in rest) + "\n")
    parts.append(BLOCK_SEPARATOR)
    return "".join(parts)
