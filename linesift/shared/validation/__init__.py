from .validator_interface import ValidationIssue, ValidationResult, ValidationSeverity
from .validation_rules import (
    ValidationRule,
    TypeRule,
    RangeRule,
    CustomRule
)
from .validation_engine import ValidationEngine

__all__ = [
    'ValidationIssue',
    'ValidationResult',
    'ValidationSeverity',
    'ValidationRule',
    'TypeRule',
    'RangeRule',
    'CustomRule',
    'ValidationEngine'
]
