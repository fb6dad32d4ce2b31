# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running jsdoc2rst through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from jsdoc2rst.cli.exit_codes import ExitCode
from jsdoc2rst.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``argv`` and optional STDIN content.

    Args:
        argv (Sequence[str] | None): CLI argument vector, e.g. ``["mypkg"]``.
        input_text (str | bytes | IO[Any] | None): Content provided on STDIN.

    Returns:
        Result: The `click.testing.Result`; ``result.stdout`` holds the
            generated markup only, diagnostics are in ``result.stderr``.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv or []), input=input_text)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert ``result`` exited with ``code``, showing the output on failure."""
    assert result.exit_code == code, (
        f"expected {code!r}, got {result.exit_code}\n"
        f"stdout:\n{result.stdout}\nstderr:\n{result.stderr}"
    )


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert a successful run without an escaped exception."""
    assert result.exception is None, repr(result.exception)
    assert_exit(result, ExitCode.SUCCESS)
