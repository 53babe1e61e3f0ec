"""Abstract ValidationRule interface."""

from __future__ import annotations

import abc
from typing import Any

from epiaudit.models.audit import AuditInput


class ValidationIssue:
    """A single field-level problem found by a rule."""

    def __init__(
        self,
        rule_name: str,
        field: str,
        message: str,
    ) -> None:
        self.rule_name = rule_name
        self.field = field
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_name": self.rule_name,
            "field": self.field,
            "message": self.message,
        }


class ValidationRule(abc.ABC):
    """Base class for all audit validation rules."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short rule identifier."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable description."""

    @abc.abstractmethod
    def check(self, audit: AuditInput) -> list[ValidationIssue]:
        """Run this rule against an audit.

        Must not mutate *audit*.  Returns a list of issues (empty if passing).
        """
