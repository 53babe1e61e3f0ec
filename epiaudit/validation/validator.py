"""InputValidator — gatekeeper for audits entering the pipeline.

Usage::

    from epiaudit.validation import InputValidator

    result = InputValidator().validate(audit)
    if not result.is_valid:
        print(result.errors)
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from epiaudit.models.audit import AuditInput
from epiaudit.validation.rules.base import ValidationIssue, ValidationRule
from epiaudit.validation.rules.record import RecordRules

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    """Validity flag plus a field -> message mapping."""

    is_valid: bool = True
    errors: dict[str, str] = Field(default_factory=dict)


class InputValidator:
    """Run every registered rule and collect all errors.

    Rules are not short-circuited: each is evaluated so the caller can show
    every problem at once.

    Parameters
    ----------
    current_year:
        Reference year for the year-built check.  Defaults to today's year.
    """

    def __init__(self, current_year: int | None = None) -> None:
        self.rules: list[ValidationRule] = RecordRules.all_rules(current_year)

    def add_rule(self, rule: ValidationRule) -> None:
        """Register an additional validation rule."""
        self.rules.append(rule)

    def issues(self, audit: AuditInput) -> list[ValidationIssue]:
        found: list[ValidationIssue] = []
        for rule in self.rules:
            found.extend(rule.check(audit))
        return found

    def validate(self, audit: AuditInput) -> ValidationResult:
        errors: dict[str, str] = {}
        for issue in self.issues(audit):
            # First message per field wins
            errors.setdefault(issue.field, issue.message)

        if errors:
            logger.debug("Audit %s failed validation: %s", audit.id, sorted(errors))
        return ValidationResult(is_valid=not errors, errors=errors)
