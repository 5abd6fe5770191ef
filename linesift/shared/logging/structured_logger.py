"""
Structured logger implementation.

This module provides a structured logging implementation that
formats log messages as JSON lines on top of the logging module.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .log_formatter import LogFormatter
from .logger_interface import LoggerInterface, LogLevel


class StructuredLogger(LoggerInterface):
    """
    Structured logger implementation.

    Each record is one JSON object carrying the message, the logger's
    bound context, and any per-call fields.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        output: Optional[TextIO] = None
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Initial log level
            output: Output stream for logs; defaults to the current stderr
        """
        self.name = name
        self._level = level
        self._context: Dict[str, Any] = {}

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.severity)

        # Loggers are process-wide; keep one handler per name and point
        # it at the latest stream
        stream = output if output is not None else sys.stderr
        handler = next(
            (h for h in self._logger.handlers if getattr(h, "_linesift", False)),
            None
        )
        if handler is None:
            handler = logging.StreamHandler(stream)
            handler.setFormatter(logging.Formatter('%(message)s'))
            handler._linesift = True
            self._logger.addHandler(handler)
        else:
            handler.setStream(stream)

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: Optional[Exception] = None,
        **kwargs: Any
    ) -> None:
        """
        Internal logging method.

        Args:
            level: Log level
            message: Message to log
            exc_info: Optional exception
            **kwargs: Additional context
        """
        if level.severity < self._level.severity:
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.value,
            "logger": self.name,
            "message": message,
            "context": {**self._context, **kwargs}
        }

        if exc_info:
            log_entry["exception"] = LogFormatter.format_error(exc_info)

        self._logger.log(level.severity, json.dumps(log_entry, default=str))

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info: Optional[Exception] = None, **kwargs: Any) -> None:
        """Log an exception."""
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self._level = level
        self._logger.setLevel(level.severity)

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self._context.update(kwargs)


def configure_logging(name: str = "linesift", level: LogLevel = LogLevel.INFO, output: Optional[TextIO] = None) -> StructuredLogger:
    """
    Configure and return a StructuredLogger instance.
    Args:
        name: Logger name
        level: Logging level
        output: Output stream for logs
    Returns:
        StructuredLogger: Configured logger instance
    """
    return StructuredLogger(name=name, level=level, output=output)
