"""
Environment configuration for environment-specific settings.

This module applies environment variable overrides on top of the
file-based configuration and exposes typed getters.
"""

from typing import Dict, Any, Optional
import os


class EnvironmentConfig:
    """
    Environment-specific configuration.

    This class provides configuration settings with support for
    environment variable overrides.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the configuration.

        Args:
            config: Merged file configuration
        """
        self.config = config
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        engine_config = self.config.setdefault("engine", {})

        if "LINESIFT_RG_PATH" in os.environ:
            engine_config["executable"] = os.environ["LINESIFT_RG_PATH"]

        if "LINESIFT_TIMEOUT" in os.environ:
            raw = os.environ["LINESIFT_TIMEOUT"]
            try:
                engine_config["timeout_seconds"] = float(raw)
            except ValueError:
                # Left as-is so the validator reports it
                engine_config["timeout_seconds"] = raw

        log_config = self.config.setdefault("logging", {})

        if "LOG_LEVEL" in os.environ:
            log_config["level"] = os.environ["LOG_LEVEL"].upper()

        server_config = self.config.setdefault("server", {})

        if "LINESIFT_HOST" in os.environ:
            server_config["host"] = os.environ["LINESIFT_HOST"]

        if "LINESIFT_PORT" in os.environ:
            raw = os.environ["LINESIFT_PORT"]
            server_config["port"] = int(raw) if raw.isdigit() else raw

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level section."""
        return self.config.get(key, default)

    def get_engine_executable(self) -> str:
        """
        Get the search engine executable.

        Returns:
            str: Executable name or path
        """
        return self.config["engine"].get("executable", "rg")

    def get_engine_timeout(self) -> Optional[float]:
        """
        Get the search timeout.

        Returns:
            Optional[float]: Timeout in seconds, or None when disabled
        """
        timeout = self.config["engine"].get("timeout_seconds")
        if not timeout:
            return None
        return float(timeout)

    def get_log_level(self) -> str:
        """
        Get logging level.

        Returns:
            str: Logging level
        """
        return self.config["logging"].get("level", "INFO")

    def get_server_host(self) -> str:
        return self.config["server"].get("host", "127.0.0.1")

    def get_server_port(self) -> int:
        return int(self.config["server"].get("port", 8000))
