"""
Configuration module for the FAQ system.

This module provides a Config class for loading and accessing configuration values
from a YAML file, with support for environment variable substitution in string values.
When no configuration file is available the built-in defaults are used, so the
generation pipeline runs with the documented constants out of the box.
"""

import os
from pathlib import Path
import yaml
import logging

DEFAULT_CONFIG_PATH = "./config/config.yaml"

class Config:
    """
    Provides access to configuration values loaded from a dictionary.

    Supports nested access using dot notation (e.g., 'LOGGING.LEVEL').
    """
    def __init__(self, config_data: dict):
        """
        Initialize the Config object.

        Args:
            config_data: Dictionary containing configuration data.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info(f"Called Config.__init__(config_data={config_data})")
        self._config = config_data or {}

    def get_nested(self, path: str, default=None):
        """
        Retrieve a nested configuration value using dot notation.

        Args:
            path: Configuration path using dot notation (e.g., 'LOGGING.LEVEL').
            default: Value to return if the path does not exist.

        Returns:
            The configuration value at the specified path, or the default if not found.
        """
        current = self._config
        for key in path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                self.logger.debug(f"Config.get_nested({path}) not found, returning default={default!r}")
                return default
        self.logger.debug(f"Config.get_nested({path}) -> {current!r}")
        return current

def _substitute_env(value):
    if isinstance(value, str) and value.startswith('${') and value.endswith('}'):
        return os.getenv(value[2:-1])
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value

def get_config(config_path: str = None) -> Config:
    """
    Load configuration from a YAML file and return a Config object.

    Args:
        config_path: Path to the configuration YAML file. If None, the default
            './config/config.yaml' is used when it exists, otherwise built-in defaults apply.

    Returns:
        Config: An instance of the Config class with loaded configuration data.

    Raises:
        FileNotFoundError: If an explicitly given configuration file does not exist.
        yaml.YAMLError: If the configuration file is invalid YAML.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"Called get_config(config_path={config_path})")
    if config_path is None:
        default_path = Path(DEFAULT_CONFIG_PATH)
        if not default_path.exists():
            logger.info(f"No configuration file at {default_path}, using built-in defaults")
            return Config({})
        config_path = default_path
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        config_data = yaml.safe_load(f) or {}

    # Substitute ${VAR} references with environment variables
    config_data = _substitute_env(config_data)

    return Config(config_data)
