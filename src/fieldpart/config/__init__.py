"""Configuration models and loaders for fieldpart."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import DEFAULT_MISSING_PLACEHOLDER, FieldpartConfig, PartitionerConfig, RuntimeConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MISSING_PLACEHOLDER",
    "FieldpartConfig",
    "PartitionerConfig",
    "RuntimeConfig",
    "dump_example_config",
    "load_config",
]
