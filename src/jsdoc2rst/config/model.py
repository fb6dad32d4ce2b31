# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : model.py
#   file_relpath : src/jsdoc2rst/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot built once at process start and passed
      explicitly to the pipeline (there is no module-level prefix state).
    - `MutableConfig`: a mutable builder used while layering defaults, a TOML
      file and CLI arguments; it can be frozen into `Config` and thawed back.

TOML I/O lives in `jsdoc2rst.config.io`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from jsdoc2rst.config.logging import get_logger
from jsdoc2rst.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from jsdoc2rst.config.logging import Jsdoc2RstLogger

logger: Jsdoc2RstLogger = get_logger(__name__)


class SourceType(str, Enum):
    """ECMAScript parse goal used by the comment extractor."""

    SCRIPT = "script"
    MODULE = "module"

    @classmethod
    def parse(cls, value: str) -> SourceType:
        """Return the member named by ``value`` (case-insensitive).

        Raises:
            ConfigError: If ``value`` names no member.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigError(
                f"Invalid source type {value!r} (expected one of: {choices})"
            ) from None


#: Keys accepted in a configuration table.
CONFIG_KEYS: frozenset[str] = frozenset({"prefix", "source-type"})


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        prefix (str | None): Dotted namespace prefix used to qualify directive
            identifiers; ``None`` disables rewriting.
        source_type (SourceType): Parse goal handed to the comment extractor.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    prefix: str | None = None
    source_type: SourceType = SourceType.SCRIPT
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            prefix=self.prefix,
            source_type=self.source_type,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    ``None`` means "not set by this layer" so that `merge_with` can tell an
    explicit value from a missing one.
    """

    prefix: str | None = None
    source_type: SourceType | None = None
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        An empty or whitespace-only prefix is normalized to ``None``.
        """
        prefix = self.prefix.strip() if self.prefix is not None else None
        return Config(
            prefix=prefix or None,
            source_type=self.source_type or SourceType.SCRIPT,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            prefix=other.prefix if other.prefix is not None else self.prefix,
            source_type=other.source_type
            if other.source_type is not None
            else self.source_type,
            config_files=self.config_files + other.config_files,
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from a parsed configuration table.

        Args:
            data (Mapping[str, Any]): The ``[tool.jsdoc2rst]`` table or the top-level
                table of a dedicated configuration file.
            config_file (Path | None): Source file, recorded for diagnostics.

        Returns:
            MutableConfig: The draft holding the values present in ``data``.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        for key in sorted(set(data) - CONFIG_KEYS):
            logger.warning("Ignoring unknown configuration key %r in %s", key, config_file)

        draft = cls()
        if config_file is not None:
            draft.config_files = [config_file]

        prefix: Any = data.get("prefix")
        if prefix is not None:
            if not isinstance(prefix, str):
                raise ConfigError(f"'prefix' must be a string, got {type(prefix).__name__}")
            draft.prefix = prefix

        source_type: Any = data.get("source-type")
        if source_type is not None:
            if not isinstance(source_type, str):
                raise ConfigError(
                    f"'source-type' must be a string, got {type(source_type).__name__}"
                )
            draft.source_type = SourceType.parse(source_type)

        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_cli_args(
        cls,
        *,
        prefix: str | None = None,
        source_type: str | None = None,
    ) -> MutableConfig:
        """Build the CLI layer; arguments left at ``None`` do not override."""
        return cls(
            prefix=prefix,
            source_type=SourceType.parse(source_type) if source_type is not None else None,
        )
