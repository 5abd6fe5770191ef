"""
Log formatter for consistent message formatting.

This module provides utilities for formatting log fields
in a consistent way across the application.
"""

import traceback
from typing import Any, Dict


class LogFormatter:
    """
    Log formatter for consistent message formatting.

    This class provides methods for formatting errors and timings
    in a consistent way.
    """

    @staticmethod
    def format_error(
        error: Exception
    ) -> Dict[str, Any]:
        """
        Format an error for logging.

        Args:
            error: The error to format

        Returns:
            Dict[str, Any]: Formatted error
        """
        return {
            "type": error.__class__.__name__,
            "message": str(error),
            "traceback": traceback.format_exception(
                type(error),
                error,
                error.__traceback__
            )
        }

    @staticmethod
    def format_duration(seconds: float) -> str:
        """
        Format a duration in seconds.

        Args:
            seconds: Duration in seconds

        Returns:
            str: Formatted duration
        """
        if seconds < 1:
            return f"{seconds * 1000:.0f}ms"
        elif seconds < 60:
            return f"{seconds:.2f}s"
        else:
            minutes = seconds / 60
            return f"{minutes:.2f}m"
