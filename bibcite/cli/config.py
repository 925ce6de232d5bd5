"""Configuration file loading for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

from bibcite.core.config import Config
from bibcite.core.exceptions import ConfigError

# Environment variables and the configuration key they override
ENV_OVERRIDES = {
    "BIBCITE_BIBLIOGRAPHY": "bibliography",
    "BIBCITE_STYLE": "style",
    "BIBCITE_REFS_FILE": "refs-file",
}


class ConfigFile:
    """YAML configuration files."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Error reading config file {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Project configuration files, lowest precedence first."""
        return [Path(".bibcite.yaml"), Path("bibcite.yaml")]

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def env_overrides() -> dict[str, Any]:
    """Configuration values set through environment variables."""
    overrides = {}
    for variable, key in ENV_OVERRIDES.items():
        if value := os.environ.get(variable):
            overrides[key] = value
    return overrides


def load_config(
    path: Path | None = None, overrides: dict[str, Any] | None = None
) -> Config:
    """Build the rendering configuration.

    Precedence, lowest first: configuration files (``path`` if given,
    otherwise every existing default file), environment variables,
    ``overrides``. ``None`` values in ``overrides`` are ignored so unset
    CLI options don't mask file values.
    """
    data: dict[str, Any] = {}

    if path is not None:
        data = ConfigFile.from_file(path)
    else:
        for candidate in ConfigFile.get_config_paths():
            if candidate.exists():
                data = ConfigFile.merge_configs(data, ConfigFile.from_file(candidate))

    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    data = ConfigFile.merge_configs(data, env_overrides(), explicit)

    return Config.from_mapping(data)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
