"""
Configuration module for manymap.

Uses pydantic-settings for environment variable and YAML file loading.
"""

from manymap.config.settings import Settings, get_settings, reset_settings
from manymap.config.sources import YamlSettingsSource
from manymap.config.types import ConfigBase, HashingConfig, IterationConfig

__all__ = [
    "ConfigBase",
    "HashingConfig",
    "IterationConfig",
    "Settings",
    "YamlSettingsSource",
    "get_settings",
    "reset_settings",
]
