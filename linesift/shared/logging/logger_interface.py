"""
Logger interface for standardized logging across the application.

This module defines the interface for logging implementations,
ensuring consistent logging behavior across the application.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from enum import Enum


class LogLevel(Enum):
    """Standard log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def severity(self) -> int:
        """Numeric severity as used by the logging module."""
        return _SEVERITIES[self.value]

    @classmethod
    def parse(cls, name: str) -> 'LogLevel':
        """
        Parse a level name case-insensitively.

        Args:
            name: Level name such as "info" or "WARNING"

        Returns:
            LogLevel: Matching level

        Raises:
            ValueError: If the name is not a known level
        """
        return cls(name.strip().upper())


_SEVERITIES = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50
}


class LoggerInterface(ABC):
    """
    Interface for logging implementations.

    This abstract class defines the contract that all logging
    implementations must follow.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log an info message.

        Args:
            message: The message to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """
        Log a warning message.

        Args:
            message: The message to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """
        Log an error message.

        Args:
            message: The message to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def exception(self, message: str, exc_info: Optional[Exception] = None, **kwargs: Any) -> None:
        """
        Log an exception.

        Args:
            message: The message to log
            exc_info: Optional exception to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        pass

    @abstractmethod
    def add_context(self, **kwargs: Any) -> None:
        """
        Add context data to all subsequent log messages.

        Args:
            **kwargs: Context data to add
        """
        pass
