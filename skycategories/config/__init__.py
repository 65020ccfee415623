"""
Configuration management for the Sky Categories client.

Handles loading and validation of configuration files.
"""

from skycategories.config.settings import (
    ClientConfig,
    LoggingConfig,
    SkyCategoriesConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "SkyCategoriesConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
