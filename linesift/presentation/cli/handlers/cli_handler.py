"""
CLI handler for managing command execution.

This module provides a base handler for CLI commands,
with support for command execution and error handling.
"""

from typing import Any, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...cli.formatters.output_formatter import OutputFormatter
from ....shared.exceptions import ErrorContextManager


@dataclass
class CommandResult:
    """Result of a command execution."""

    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[Exception] = None


class CommandHandler(ABC):
    """
    Base class for command handlers.

    This class provides a base implementation for command handlers,
    with support for command execution and error handling.
    """

    def __init__(self, formatter: OutputFormatter):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
        """
        self.formatter = formatter

    @abstractmethod
    async def execute(self, **kwargs) -> CommandResult:
        """
        Execute the command.

        Args:
            **kwargs: Command arguments

        Returns:
            CommandResult: Command execution result
        """
        pass

    def handle_error(
        self,
        error: Exception,
        message: str = "An error occurred"
    ) -> CommandResult:
        """
        Handle command execution error.

        Args:
            error: Exception that occurred
            message: Error message

        Returns:
            CommandResult: Error result
        """
        context = ErrorContextManager.create_context(error)
        details = ErrorContextManager.format_context(context)

        self.formatter.print_error(
            self.formatter.format_error(message, details)
        )

        return CommandResult(
            success=False,
            message=message,
            error=error
        )

    def handle_success(
        self,
        message: str,
        data: Optional[Any] = None,
        details: Optional[str] = None
    ) -> CommandResult:
        """
        Handle command execution success.

        Args:
            message: Success message
            data: Optional result data
            details: Optional success details

        Returns:
            CommandResult: Success result
        """
        self.formatter.print_error(
            self.formatter.format_success(message, details)
        )

        return CommandResult(
            success=True,
            message=message,
            data=data
        )
