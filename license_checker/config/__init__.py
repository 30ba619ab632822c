"""Configuration handling for license-checker."""

from __future__ import annotations

from license_checker.config.defaults import (
    ACTION_INPUT_ENV,
    DEFAULT_CONFIG_NAMES,
)
from license_checker.config.loader import (
    build_config,
    find_config_file,
    load_config,
    parse_bool,
    read_config_file,
)
from license_checker.models.config import CheckerConfig

__all__ = [
    "ACTION_INPUT_ENV",
    "CheckerConfig",
    "DEFAULT_CONFIG_NAMES",
    "build_config",
    "find_config_file",
    "load_config",
    "parse_bool",
    "read_config_file",
]
