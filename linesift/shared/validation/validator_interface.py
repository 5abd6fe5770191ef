"""
Validation result types.

This module defines the shared types produced by validation,
ensuring consistent reporting of issues across the application.
"""

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Optional


class ValidationSeverity(Enum):
    """Validation severity levels."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclasses.dataclass
class ValidationIssue:
    """
    Validation issue information.

    This class represents a single validation issue,
    including its severity, message, and offending value.
    """

    # ``field`` shadows dataclasses.field inside this class body
    severity: ValidationSeverity
    message: str
    field: Optional[str] = None
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "severity": self.severity.value,
            "field": self.field,
            "message": self.message,
            "value": self.value
        }


@dataclasses.dataclass
class ValidationResult:
    """
    Validation result.

    This class represents the result of a validation operation,
    including any issues found.
    """

    is_valid: bool = True
    issues: List[ValidationIssue] = dataclasses.field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        """Issues with ERROR severity."""
        return [
            issue for issue in self.issues
            if issue.severity == ValidationSeverity.ERROR
        ]
