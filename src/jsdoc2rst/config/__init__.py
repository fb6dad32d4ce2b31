# topmark:header:start
#
#   project      : jsdoc2rst
#   file         : __init__.py
#   file_relpath : src/jsdoc2rst/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for jsdoc2rst.

Re-exports the configuration model and the TOML loading helpers.
"""

from __future__ import annotations

from jsdoc2rst.config.io import load_config_file, resolve_config
from jsdoc2rst.config.model import Config, MutableConfig, SourceType

__all__ = [
    "Config",
    "MutableConfig",
    "SourceType",
    "load_config_file",
    "resolve_config",
]
