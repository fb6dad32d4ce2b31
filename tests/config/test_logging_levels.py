# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : test_logging_levels.py
#   file_relpath : tests/config/test_logging_levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level resolution from CLI counts and the environment."""

from __future__ import annotations

import logging

import pytest

from jsdoc2rst.cli.errors import Jsdoc2RstUsageError
from jsdoc2rst.cli.options import resolve_verbosity
from jsdoc2rst.config.logging import (
    LEVEL_NAMES,
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    parse_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("NOTSET", logging.NOTSET),
        ("0", 0),
        ("15", 15),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    """Names are case-insensitive; digits are taken as numeric levels."""
    assert parse_log_level(value) == expected


@parametrize(
    "verbose, quiet, expected",
    [
        (3, 0, LEVEL_NAMES["TRACE"]),
        (2, 0, LEVEL_NAMES["DEBUG"]),
        (1, 0, LEVEL_NAMES["INFO"]),
        (0, 1, LEVEL_NAMES["ERROR"]),
        (0, 0, LEVEL_NAMES["WARNING"]),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """``-v``/``-q`` counts map onto the shared level table."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_rejects_both_flags() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    with pytest.raises(Jsdoc2RstUsageError):
        resolve_verbosity(1, 1)


def test_resolve_verbosity_honors_env_notset(monkeypatch: pytest.MonkeyPatch) -> None:
    """An environment level of NOTSET is kept, not replaced by WARNING."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "NOTSET")
    assert resolve_verbosity(0, 0) == logging.NOTSET


@parametrize("value", ["0", "NOTSET"])
def test_setup_logging_honors_env_level_zero(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """``setup_logging`` uses an environment level of 0 as given."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    try:
        setup_logging()
        assert logging.getLogger().level == logging.NOTSET
    finally:
        setup_logging(level=logging.DEBUG)


def test_setup_logging_defaults_to_warning() -> None:
    """Without a level or environment variable, WARNING applies."""
    try:
        setup_logging()
        assert logging.getLogger().level == logging.WARNING
    finally:
        setup_logging(level=logging.DEBUG)
