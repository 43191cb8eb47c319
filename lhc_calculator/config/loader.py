"""
YAML configuration loader for LHC Calculator.

Loads settings and batch scenario files from YAML with environment variable
substitution.
"""

import os
import re
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from lhc_calculator.config.models import CalculatorSettings
from lhc_calculator.domain.models import DelayCostInput

logger = structlog.get_logger()


DEFAULT_SETTINGS_PATHS = [
    Path("config/calculator.yaml"),
    Path("calculator.yaml"),
    Path.home() / ".lhc_calculator" / "calculator.yaml",
]


class ConfigurationError(Exception):
    """Raised when a settings or scenario file cannot be used."""

    pass


def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::-([^}]*))?\}"

        def replace(match: re.Match) -> str:
            var_name = match.group(1)
            default = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default)

        return re.sub(pattern, replace, value)
    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]
    return value


def load_yaml(path: Path) -> Any:
    """
    Load a YAML file and substitute environment variables.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed YAML content, or an empty dict for an empty file

    Raises:
        ConfigurationError: If the file doesn't exist or isn't valid YAML
    """
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return {}

    return _substitute_env_vars(raw)


def load_settings(
    config_path: str | Path | None = None,
    override_values: dict[str, Any] | None = None,
) -> CalculatorSettings:
    """
    Load calculator settings.

    Args:
        config_path: Path to a settings YAML file. If None, the default
                    locations are searched and built-in defaults are used
                    when none exists.
        override_values: Dictionary of values to override after loading

    Returns:
        Validated CalculatorSettings object

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping
        ValidationError: If a setting has an invalid value
    """
    if config_path is None:
        for path in DEFAULT_SETTINGS_PATHS:
            if path.exists():
                config_path = path
                break

    config_dict: dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        config_dict = load_yaml(config_path)
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Settings file must contain a mapping: {config_path}")

    if override_values:
        config_dict = _deep_merge(config_dict, override_values)

    settings = CalculatorSettings(**config_dict)
    logger.debug("settings_loaded", path=str(config_path) if config_path else None)
    return settings


def load_scenarios(path: str | Path) -> list[DelayCostInput]:
    """
    Load delay cost scenarios for a batch run.

    The file holds a list of mappings with DelayCostInput fields, or a
    mapping with a ``scenarios`` key holding that list.

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    path = Path(path)
    raw = load_yaml(path)

    if isinstance(raw, dict):
        raw = raw.get("scenarios", [])
    if not isinstance(raw, list):
        raise ConfigurationError(f"Scenario file must contain a list: {path}")

    scenarios = []
    for index, entry in enumerate(raw):
        try:
            scenarios.append(DelayCostInput(**entry))
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid scenario #{index + 1} in {path}: {e}") from e

    logger.debug("scenarios_loaded", path=str(path), count=len(scenarios))
    return scenarios


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
