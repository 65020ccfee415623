"""
Configuration management for the Sky Categories client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from skycategories.exceptions import InvalidConfigurationError
from skycategories.logging_config import get_logger

logger = get_logger(__name__)


DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${SKYCATEGORIES_API_KEY}" -> value of SKYCATEGORIES_API_KEY env var
        "${SKYCATEGORIES_BASE_URL:http://localhost:8080}" -> env value or the default
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for the categories service.

    Immutable: a client built from a ClientConfig never sees later changes.
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    token: str = ""  # default Authorization header value
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    format: str = "console"  # "console" or "json"


@dataclass
class SkyCategoriesConfig:
    """Main Sky Categories client configuration."""

    client: ClientConfig = field(default_factory=ClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.skycategories/config.yaml")


def get_default_config() -> SkyCategoriesConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        SkyCategoriesConfig: Default configuration object
    """
    return SkyCategoriesConfig(
        client=ClientConfig(),
        logging=LoggingConfig(),
    )


def load_config(config_path: Optional[str] = None) -> SkyCategoriesConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        SkyCategoriesConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> SkyCategoriesConfig:
    """
    Build SkyCategoriesConfig from dictionary loaded from YAML.

    Missing sections and keys fall back to defaults.

    Raises:
        InvalidConfigurationError: If a section has the wrong shape
    """
    default_config = get_default_config()

    client_data = config_data.get('client') or {}
    logging_data = config_data.get('logging') or {}
    for section, data in (('client', client_data), ('logging', logging_data)):
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"'{section}' section must be a mapping")

    try:
        timeout = float(client_data.get('timeout', default_config.client.timeout))
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            f"client timeout must be a number, got {client_data.get('timeout')!r}"
        ) from e

    client = ClientConfig(
        base_url=str(client_data.get('base_url') or default_config.client.base_url),
        api_key=str(client_data.get('api_key') or ""),
        token=str(client_data.get('token') or ""),
        timeout=timeout,
    )

    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=str(logging_data.get('file') or ""),
        format=str(logging_data.get('format', default_config.logging.format)),
    )

    return SkyCategoriesConfig(client=client, logging=logging)


def _validate_config(config: SkyCategoriesConfig) -> None:
    """
    Validate configuration values.

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.client.base_url:
        raise InvalidConfigurationError("client base_url cannot be empty")

    if config.client.timeout <= 0:
        raise InvalidConfigurationError(
            f"client timeout must be positive, got {config.client.timeout}"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    valid_formats = ["console", "json"]
    if config.logging.format not in valid_formats:
        raise InvalidConfigurationError(
            f"logging format must be one of {valid_formats}, "
            f"got '{config.logging.format}'"
        )
