"""Compliance tier classification and technical checks."""

from epiaudit.compliance.checker import evaluate_mandatory, suggest_actions
from epiaudit.compliance.classifier import classify
from epiaudit.compliance.engine import ComplianceAssessment, ComplianceEngine
from epiaudit.compliance.report import CheckResult, TechnicalReport
from epiaudit.compliance.scope import ScopeRequirements, scope_requirements
from epiaudit.compliance.technical import evaluate_technical

__all__ = [
    "CheckResult",
    "ComplianceAssessment",
    "ComplianceEngine",
    "ScopeRequirements",
    "TechnicalReport",
    "classify",
    "evaluate_mandatory",
    "evaluate_technical",
    "scope_requirements",
    "suggest_actions",
]
