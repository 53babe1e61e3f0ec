"""Validation rules for audit input."""

from epiaudit.validation.rules.base import ValidationIssue, ValidationRule
from epiaudit.validation.rules.record import (
    BenchmarkRange,
    NameRequired,
    PositiveFloorArea,
    RecordRules,
    YearBuiltRange,
)

__all__ = [
    "BenchmarkRange",
    "NameRequired",
    "PositiveFloorArea",
    "RecordRules",
    "ValidationIssue",
    "ValidationRule",
    "YearBuiltRange",
]
