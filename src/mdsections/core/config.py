"""Input/output path configuration for a conversion run."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

DEFAULT_INPUT_FILE = "plans.md"
DEFAULT_OUTPUT_FILE = "output.json"

# Environment variables consulted by resolve_config
INPUT_ENV_VAR = "MDSECTIONS_INPUT"
OUTPUT_ENV_VAR = "MDSECTIONS_OUTPUT"


class ConfigError(ValueError):
    """Raised when a config file does not hold a mapping of settings."""


@dataclass
class ConvertConfig:
    """Where to read markdown from and where to write the JSON output."""
    input_path: Path
    output_path: Path


def load_config(config_path: Path) -> dict:
    """Load settings from a YAML config file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the document is not a mapping
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return config


def _path_setting(file_config: Mapping, key: str) -> str | None:
    """Read a path value from the config file, rejecting non-string values."""
    value = file_config.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Config value '{key}' must be a string, got {type(value).__name__}")
    if "\0" in value:
        raise ConfigError(f"Config value '{key}' contains a null byte")
    return value


def _first_set(*values: str | os.PathLike | None) -> str | os.PathLike | None:
    for value in values:
        if value:
            return value
    return None


def resolve_config(
    input_file: str | os.PathLike | None = None,
    output_file: str | os.PathLike | None = None,
    file_config: Mapping | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConvertConfig:
    """Build a ConvertConfig from the available sources.

    Explicit arguments win over environment variables, which win over
    config file values, which win over the built-in defaults.

    Args:
        input_file: Input path given on the command line
        output_file: Output path given on the command line
        file_config: Settings loaded by load_config
        environ: Environment mapping (typically os.environ)

    Returns:
        The resolved ConvertConfig

    Raises:
        ConfigError: If a config file path value is not a usable string
    """
    file_config = file_config or {}
    environ = environ or {}

    input_path = _first_set(
        input_file,
        environ.get(INPUT_ENV_VAR),
        _path_setting(file_config, "input"),
    ) or DEFAULT_INPUT_FILE
    output_path = _first_set(
        output_file,
        environ.get(OUTPUT_ENV_VAR),
        _path_setting(file_config, "output"),
    ) or DEFAULT_OUTPUT_FILE

    return ConvertConfig(input_path=Path(input_path), output_path=Path(output_path))
