# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : io.py
#   file_relpath : src/jsdoc2rst/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads either a dedicated configuration file (keys at the top level) or a
``pyproject.toml`` (keys under ``[tool.jsdoc2rst]``). Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsdoc2rst.config.logging import get_logger
from jsdoc2rst.config.model import Config, MutableConfig
from jsdoc2rst.constants import PYPROJECT_TOOL_SECTION
from jsdoc2rst.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from jsdoc2rst.config.logging import Jsdoc2RstLogger

logger: Jsdoc2RstLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}


def extract_config_table(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Return the table holding the jsdoc2rst settings of a parsed TOML file.

    For ``pyproject.toml`` this is ``[tool.jsdoc2rst]``; a missing section
    yields an empty table and a warning.
    """
    if path.name != "pyproject.toml":
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if section is None:
        logger.warning("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return cast("dict[str, Any]", section)


def load_config_file(path: Path) -> MutableConfig:
    """Load a configuration file into a draft."""
    logger.debug("Creating MutableConfig from TOML config: %s", path)
    table = extract_config_table(load_toml_dict(path), path)
    return MutableConfig.from_toml_dict(table, config_file=path)


def resolve_config(
    *,
    config_file: Path | None = None,
    prefix: str | None = None,
    source_type: str | None = None,
) -> Config:
    """Layer defaults, an optional configuration file and CLI values into a `Config`.

    Precedence: defaults < ``config_file`` < explicit arguments.
    """
    draft = MutableConfig()
    if config_file is not None:
        draft = draft.merge_with(load_config_file(config_file))
    draft = draft.merge_with(MutableConfig.from_cli_args(prefix=prefix, source_type=source_type))
    config = draft.freeze()
    logger.debug("Resolved config: %s", config)
    return config
