"""
Configuration manager for centralized configuration handling.

This module provides a manager for loading and managing application
configurations, with support for different environments.
"""

import copy
from typing import Dict, Any, Optional
import os
import yaml
from pathlib import Path

from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

DEFAULT_CONFIG: Dict[str, Any] = {
    "engine": {
        "executable": "rg",
        "timeout_seconds": 30.0
    },
    "search": {
        "max_depth": 5,
        "context_lines": 0,
        "case_sensitive": True,
        "search_hidden": False
    },
    "logging": {
        "level": "INFO"
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8000
    }
}


class ConfigManager:
    """
    Manager for application configurations.

    Built-in defaults are overlaid with ``base.yaml`` and then
    ``<environment>.yaml`` from the config directory, when those
    files exist, and finally with environment variables.
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        environment: Optional[str] = None
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Configuration directory path
            environment: Optional environment name
        """
        self.config_dir = Path(config_dir or os.getenv("LINESIFT_CONFIG_DIR", "config"))
        self.environment = environment or os.getenv("APP_ENV", "development")
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from defaults, files and environment.

        Returns:
            EnvironmentConfig: Loaded configuration

        Raises:
            ValueError: If configuration is invalid
        """
        if self._config is not None:
            return self._config

        config = copy.deepcopy(DEFAULT_CONFIG)
        config = self._merge_configs(config, self._load_yaml("base.yaml"))
        config = self._merge_configs(config, self._load_yaml(f"{self.environment}.yaml"))

        env_config = EnvironmentConfig(config)

        self.validator.validate_config(env_config.config)

        self._config = env_config
        return self._config

    def get_config(self) -> EnvironmentConfig:
        """
        Get the current configuration.

        Returns:
            EnvironmentConfig: Current configuration
        """
        return self.load_config()

    def get_search_defaults(self) -> Dict[str, Any]:
        """
        Get default search option values.

        Returns:
            Dict[str, Any]: Search section of the configuration
        """
        return dict(self.get_config().get("search", {}))

    def _load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name

        Returns:
            Dict[str, Any]: Loaded configuration, empty when the file
                does not exist or is empty

        Raises:
            ValueError: If the file does not hold a mapping
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            return {}

        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {file_path}")
        return data

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
