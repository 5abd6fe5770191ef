"""
Validation rules for standardized validation.

This module provides reusable validation rules that can be
composed to create validation logic for search options.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

from .validator_interface import ValidationSeverity


class ValidationRule(ABC):
    """
    Base class for validation rules.

    This abstract class defines the interface for validation
    rules and provides common functionality.
    """

    def __init__(
        self,
        message: str,
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize validation rule.

        Args:
            message: Error message
            severity: Rule severity
        """
        self.message = message
        self.severity = severity

    @abstractmethod
    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """
        Validate value.

        Args:
            value: Value to validate
            context: Optional validation context

        Returns:
            bool: Whether value is valid
        """
        pass


class TypeRule(ValidationRule):
    """Rule that validates value type. Booleans never satisfy a numeric type."""

    def __init__(
        self,
        message: str,
        expected_type: Union[Type, Tuple[Type, ...]],
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize type rule.

        Args:
            message: Error message
            expected_type: Expected value type or tuple of types
            severity: Rule severity
        """
        super().__init__(message, severity)
        self.expected_type = expected_type

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is of expected type."""
        if isinstance(value, bool) and not _accepts_bool(self.expected_type):
            return False
        return isinstance(value, self.expected_type)


class RangeRule(ValidationRule):
    """Rule that validates value range."""

    def __init__(
        self,
        message: str,
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None,
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize range rule.

        Args:
            message: Error message
            min_value: Minimum allowed value
            max_value: Maximum allowed value
            severity: Rule severity
        """
        super().__init__(message, severity)
        self.min_value = min_value
        self.max_value = max_value

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is within range."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False

        if self.min_value is not None and value < self.min_value:
            return False

        if self.max_value is not None and value > self.max_value:
            return False

        return True


class CustomRule(ValidationRule):
    """Rule that uses custom validation function."""

    def __init__(
        self,
        message: str,
        validator: Callable[[Any, Optional[Dict[str, Any]]], bool],
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize custom rule.

        Args:
            message: Error message
            validator: Validation function
            severity: Rule severity
        """
        super().__init__(message, severity)
        self.validator = validator

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is valid using custom validator."""
        return self.validator(value, context)


def _accepts_bool(expected_type: Union[Type, Tuple[Type, ...]]) -> bool:
    types = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    return bool in types or object in types
