"""
Configuration validator for validating configuration values.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Dict, Any, List


class ConfigValidator:
    """
    Validator for configuration values.

    This class validates configuration values to ensure they meet
    the required format and constraints.
    """

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ValueError: If configuration is invalid
        """
        self.errors = []

        if "engine" in config:
            self._validate_engine_config(config["engine"])

        if "search" in config:
            self._validate_search_config(config["search"])

        if "logging" in config:
            self._validate_logging_config(config["logging"])

        if "server" in config:
            self._validate_server_config(config["server"])

        if self.errors:
            raise ValueError("\n".join(self.errors))

    def _validate_engine_config(self, config: Dict[str, Any]) -> None:
        """
        Validate engine configuration.

        Args:
            config: Engine configuration
        """
        if "executable" in config:
            executable = config["executable"]
            if not isinstance(executable, str) or not executable:
                self.errors.append("Engine executable must be a non-empty string")

        # 0 or null disables the timeout
        if config.get("timeout_seconds") is not None:
            timeout = config["timeout_seconds"]
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
                self.errors.append("Engine timeout must be a non-negative number")

    def _validate_search_config(self, config: Dict[str, Any]) -> None:
        """
        Validate search defaults.

        Args:
            config: Search configuration
        """
        if "max_depth" in config:
            depth = config["max_depth"]
            if isinstance(depth, bool) or not isinstance(depth, int) or not 1 <= depth <= 10:
                self.errors.append("Search max_depth must be an integer between 1 and 10")

        if "context_lines" in config:
            lines = config["context_lines"]
            if isinstance(lines, bool) or not isinstance(lines, int) or lines < 0:
                self.errors.append("Search context_lines must be a non-negative integer")

        for flag in ("case_sensitive", "search_hidden"):
            if flag in config and not isinstance(config[flag], bool):
                self.errors.append(f"Search {flag} must be a boolean")

    def _validate_logging_config(self, config: Dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        if "level" in config:
            level = config["level"]
            valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
            if not isinstance(level, str) or level.upper() not in valid_levels:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(valid_levels)}"
                )

    def _validate_server_config(self, config: Dict[str, Any]) -> None:
        """
        Validate HTTP server configuration.

        Args:
            config: Server configuration
        """
        if "host" in config:
            host = config["host"]
            if not isinstance(host, str) or not host:
                self.errors.append("Server host must be a non-empty string")

        if "port" in config:
            port = config["port"]
            if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
                self.errors.append("Server port must be an integer between 1 and 65535")
