"""Core domain models and configuration."""

from .config import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    ConfigError,
    ConvertConfig,
    load_config,
    resolve_config,
)
from .entry import HeaderEntry, SectionMap

__all__ = [
    "DEFAULT_INPUT_FILE",
    "DEFAULT_OUTPUT_FILE",
    "ConfigError",
    "ConvertConfig",
    "HeaderEntry",
    "SectionMap",
    "load_config",
    "resolve_config",
]
