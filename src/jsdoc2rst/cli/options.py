# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/jsdoc2rst/cli/options.py
#   project      : jsdoc2rst
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity) and their resolution
logic, so the command itself can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from jsdoc2rst.cli.errors import Jsdoc2RstUsageError
from jsdoc2rst.config.logging import LEVEL_NAMES, resolve_env_log_level

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        Jsdoc2RstUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Without either flag, ``JSDOC2RST_LOG_LEVEL`` applies, else WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise Jsdoc2RstUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LEVEL_NAMES["TRACE"]
    if verbose_count == 2:  # -vv
        return LEVEL_NAMES["DEBUG"]
    if verbose_count == 1:  # -v
        return LEVEL_NAMES["INFO"]

    if quiet_count >= 1:  # -q
        return LEVEL_NAMES["ERROR"]

    env_level = resolve_env_log_level()
    return env_level if env_level is not None else LEVEL_NAMES["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr. Repeat for more detail (up to -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors on stderr.",
    )(f)
    return f
