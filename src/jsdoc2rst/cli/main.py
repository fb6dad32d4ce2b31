# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : main.py
#   file_relpath : src/jsdoc2rst/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for jsdoc2rst.

Reads JavaScript source from STDIN (or ``--input``), writes the extracted
documentation blocks as reStructuredText to STDOUT (or ``--output``). The
optional ``PREFIX`` argument qualifies the identifiers of directive lines.

Examples:
    Convert a file, qualifying names under ``mylib.util``::

        jsdoc2rst mylib.util < util.js > util.rst
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jsdoc2rst.cli.errors import (
    Jsdoc2RstConfigError,
    Jsdoc2RstEncodingError,
    Jsdoc2RstIOError,
    Jsdoc2RstParseError,
)
from jsdoc2rst.cli.options import common_verbose_options, resolve_verbosity
from jsdoc2rst.config.io import resolve_config
from jsdoc2rst.config.logging import get_logger, setup_logging
from jsdoc2rst.config.model import SourceType
from jsdoc2rst.constants import JSDOC2RST_VERSION, PROJECT_NAME
from jsdoc2rst.errors import ConfigError, SourceParseError
from jsdoc2rst.pipeline.runner import convert_stream

if TYPE_CHECKING:
    from typing import TextIO

    from jsdoc2rst.config.logging import Jsdoc2RstLogger
    from jsdoc2rst.config.model import Config

logger: Jsdoc2RstLogger = get_logger(__name__)


@click.command(
    name=PROJECT_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Extract /** documentation comments */ from JavaScript as reStructuredText.",
)
@click.argument("prefix", required=False, default=None)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default=True,
    help="Read source from FILE instead of STDIN ('-').",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.File("w", encoding="utf-8", lazy=True),
    default="-",
    show_default=True,
    help="Write reStructuredText to FILE instead of STDOUT ('-').",
)
@click.option(
    "--source-type",
    "source_type",
    type=click.Choice([m.value for m in SourceType], case_sensitive=False),
    default=None,
    help="Parse the source as a classic script (default) or as an ES module.",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML configuration file (or a pyproject.toml with [tool.jsdoc2rst]).",
)
@common_verbose_options
@click.version_option(JSDOC2RST_VERSION, prog_name=PROJECT_NAME)
def cli(
    *,
    prefix: str | None,
    input_file: TextIO,
    output_file: TextIO,
    source_type: str | None,
    config_file: Path | None,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the jsdoc2rst CLI."""
    setup_logging(level=resolve_verbosity(verbose, quiet))

    try:
        config: Config = resolve_config(
            config_file=config_file,
            prefix=prefix,
            source_type=source_type,
        )
    except ConfigError as e:
        raise Jsdoc2RstConfigError(str(e)) from e

    try:
        convert_stream(input_file, output_file, config)
    except SourceParseError as e:
        logger.debug("Extractor failure", exc_info=e)
        raise Jsdoc2RstParseError(str(e)) from e
    except UnicodeDecodeError as e:
        raise Jsdoc2RstEncodingError(f"Cannot decode input as UTF-8: {e}") from e
    except click.FileError as e:
        raise Jsdoc2RstIOError(e.format_message()) from e
    except OSError as e:
        raise Jsdoc2RstIOError(str(e)) from e


if __name__ == "__main__":
    cli()
