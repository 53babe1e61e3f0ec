"""Input validation for audit records."""

from epiaudit.validation.rules.base import ValidationIssue, ValidationRule
from epiaudit.validation.validator import InputValidator, ValidationResult

__all__ = ["InputValidator", "ValidationIssue", "ValidationResult", "ValidationRule"]
