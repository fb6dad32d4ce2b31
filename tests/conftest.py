# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the jsdoc2rst test suite.

This file sets up global fixtures, typed mark wrappers and a synthetic comment
extractor so that pipeline tests do not depend on the real JavaScript parser.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from jsdoc2rst.config import logging
from jsdoc2rst.extract.base import CommentKind, CommentRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class FakeExtractor:
    """Comment extractor returning a fixed list of records."""

    def __init__(self, records: Sequence[CommentRecord]) -> None:
        self.records = list(records)
        self.seen: list[str] = []

    def extract_comments(self, text: str) -> list[CommentRecord]:
        self.seen.append(text)
        return list(self.records)


def block(body: str) -> CommentRecord:
    """Shorthand for a block comment record."""
    return CommentRecord(kind=CommentKind.BLOCK, body=body)


def line(body: str) -> CommentRecord:
    """Shorthand for a line comment record."""
    return CommentRecord(kind=CommentKind.LINE, body=body)


#: ``/**\n * function:: foo()\n *\n * Does a thing.\n */`` as reported by the parser.
FOO_DOC_BODY = "*\n * function:: foo()\n *\n * Does a thing.\n "

FOO_SOURCE = "/**\n * function:: foo()\n *\n * Does a thing.\n */\nfunction foo() {}\n"

FOO_RST_PKG = "..  function:: pkg.foo()\n    \n    Does a thing.\n\n\n"


@pytest.fixture(autouse=True)
def silence_jsdoc2rst_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at DEBUG level to stderr for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.logging.DEBUG)
