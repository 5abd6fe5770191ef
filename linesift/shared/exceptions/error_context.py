"""
Error context management system.

This module provides utilities for turning a search failure into
structured error information for logs and error payloads.
"""

from datetime import datetime, timezone
from typing import Any, Dict
from dataclasses import dataclass, field

from .search_errors import SearchError


@dataclass
class ErrorContext:
    """
    Structured error context information.

    This class provides a standardized way to capture and report
    a failed search across the HTTP, CLI and logging layers.
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error_type: str = ""
    error_message: str = ""
    context_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.error_type,
            "error_message": self.error_message,
            "context_data": self.context_data
        }


class ErrorContextManager:
    """
    Manager for error context information.

    This class provides utilities for creating and rendering
    error context information.
    """

    @staticmethod
    def create_context(
        error: Exception,
        **context_data: Any
    ) -> ErrorContext:
        """
        Create error context from exception.

        Context carried by a SearchError is merged beneath the
        explicitly passed context data.

        Args:
            error: The exception to create context from
            **context_data: Additional context data

        Returns:
            ErrorContext: Created error context
        """
        data: Dict[str, Any] = {}
        if isinstance(error, SearchError):
            data.update(error.context)
        data.update(context_data)

        return ErrorContext(
            error_type=error.__class__.__name__,
            error_message=str(error),
            context_data=data
        )

    @staticmethod
    def format_context(context: ErrorContext) -> str:
        """
        Format error context as string.

        Args:
            context: Error context to format

        Returns:
            str: Formatted error context
        """
        parts = [
            f"Error: {context.error_type}",
            f"Message: {context.error_message}"
        ]

        if context.context_data:
            context_str = ", ".join(
                f"{k}={v}" for k, v in context.context_data.items()
            )
            parts.append(f"Context: {context_str}")

        return "\n".join(parts)
