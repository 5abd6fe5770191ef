"""
Validation engine for orchestrating validation rules.

This module provides a validation engine that manages and executes
validation rules against data structures.
"""

from typing import Any, Dict, List

from .validator_interface import ValidationIssue, ValidationResult, ValidationSeverity
from .validation_rules import ValidationRule


class ValidationEngine:
    """
    Engine for orchestrating validation rules.

    This class manages validation rules and executes them against
    data structures, providing detailed validation results.
    """

    def __init__(self):
        """Initialize validation engine."""
        self._rules: Dict[str, List[ValidationRule]] = {}

    def add_rule(
        self,
        field_path: str,
        rule: ValidationRule
    ) -> None:
        """
        Add validation rule for a field.

        Args:
            field_path: Path to field in dot notation
            rule: Validation rule to add
        """
        if field_path not in self._rules:
            self._rules[field_path] = []
        self._rules[field_path].append(rule)

    def add_rules(
        self,
        field_path: str,
        rules: List[ValidationRule]
    ) -> None:
        """
        Add multiple validation rules for a field.

        Args:
            field_path: Path to field in dot notation
            rules: List of validation rules to add
        """
        if field_path not in self._rules:
            self._rules[field_path] = []
        self._rules[field_path].extend(rules)

    def validate(
        self,
        data: Dict[str, Any]
    ) -> ValidationResult:
        """
        Validate data against all rules.

        Fields are checked in the order their rules were registered.

        Args:
            data: Data to validate

        Returns:
            ValidationResult: Validation result
        """
        issues: List[ValidationIssue] = []

        for field_path, rules in self._rules.items():
            value = self._get_value(data, field_path)
            issues.extend(
                self._validate_field(
                    value,
                    rules,
                    field_path
                )
            )

        return ValidationResult(
            is_valid=not any(
                issue.severity == ValidationSeverity.ERROR for issue in issues
            ),
            issues=issues
        )

    def _validate_field(
        self,
        value: Any,
        rules: List[ValidationRule],
        field_path: str
    ) -> List[ValidationIssue]:
        """
        Validate field against rules.

        Args:
            value: Value to validate
            rules: Rules to validate against
            field_path: Path to field

        Returns:
            List[ValidationIssue]: Validation issues
        """
        issues: List[ValidationIssue] = []

        for rule in rules:
            if not rule.validate(value):
                issues.append(
                    ValidationIssue(
                        field=field_path,
                        message=rule.message,
                        severity=rule.severity,
                        value=value
                    )
                )

        return issues

    def _get_value(
        self,
        data: Dict[str, Any],
        field_path: str
    ) -> Any:
        """
        Get value from data by path.

        Args:
            data: Data to get value from
            field_path: Path to field in dot notation

        Returns:
            Any: Field value
        """
        if not field_path:
            return data

        value: Any = data
        for part in field_path.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None

        return value
