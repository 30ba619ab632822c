"""Configuration file discovery, loading and merging for license-checker."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import ValidationError

from license_checker.config.defaults import DEFAULT_CONFIG_NAMES
from license_checker.exceptions import ConfigurationError
from license_checker.models.config import CheckerConfig

_BOOLEAN_FIELDS = {"fail_on_blocked", "include_dev_dependencies", "create_issue"}


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.license-checker.yaml` first, then `.license-checker.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Read raw configuration values from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Mapping of option names to values (empty for an empty file).

    Raises:
        ConfigurationError: If the file cannot be read, has invalid YAML,
            or is not a mapping at root level.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    if not content.strip():
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    # YAML with only comments parses to None
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    # Accept the action's kebab-case spelling as well
    return {str(key).replace("-", "_"): value for key, value in data.items()}


def parse_bool(name: str, value: Any) -> bool:
    """Parse a boolean option given as bool or 'true'/'false' string.

    Raises:
        ConfigurationError: If the value is neither.
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ConfigurationError(f"Option '{name}' must be 'true' or 'false', got '{value}'")


def build_config(
    file_values: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> CheckerConfig:
    """Merge file values and overrides into a validated configuration.

    Overrides (command line options, action inputs) win over file values.
    None and empty-string overrides are treated as not given.

    Args:
        file_values: Values read from a configuration file.
        overrides: Values from the command line or environment.

    Returns:
        Validated CheckerConfig.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    merged: dict[str, Any] = dict(file_values or {})
    for key, value in (overrides or {}).items():
        if value is None or value == "":
            continue
        merged[key] = value

    for key in merged.keys() & _BOOLEAN_FIELDS:
        merged[key] = parse_bool(key, merged[key])

    try:
        return CheckerConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {_format_validation_errors(e)}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)


def load_config(
    config_path: str | None = None,
    overrides: Optional[Mapping[str, Any]] = None,
    search_dir: Path | None = None,
) -> CheckerConfig:
    """Load configuration from file and overrides, or use defaults.

    If a config_path is provided, loads from that file. Otherwise, searches
    for a configuration file in search_dir (default: current directory).

    Args:
        config_path: Optional path to configuration file.
        overrides: Values that take precedence over the file.
        search_dir: Directory to search for an implicit config file.

    Returns:
        CheckerConfig with merged values.

    Raises:
        ConfigurationError: If the config file or any value is invalid.
    """
    file_values: dict[str, Any] = {}
    if config_path is not None:
        file_values = read_config_file(Path(config_path))
    else:
        discovered = find_config_file(search_dir)
        if discovered is not None:
            file_values = read_config_file(discovered)

    config = build_config(file_values, overrides)

    if config.create_issue and not config.github_token:
        raise ConfigurationError("GitHub token is required when create-issue is enabled")

    return config
