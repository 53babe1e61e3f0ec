"""ComplianceEngine — main entry point for compliance determination.

Usage::

    from epiaudit.compliance import ComplianceEngine

    engine = ComplianceEngine()
    report = engine.check_technical(audit)
    assessment = engine.assess(record)

All calls are pure and safe on partially filled audits, so the form can show
live check status before anything is saved.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from epiaudit.compliance.checker import evaluate_mandatory, suggest_actions
from epiaudit.compliance.classifier import classify
from epiaudit.compliance.report import CheckResult, TechnicalReport
from epiaudit.compliance.scope import ScopeRequirements, scope_requirements
from epiaudit.compliance.technical import evaluate_technical
from epiaudit.models.audit import AuditInput, AuditRecord, ComplianceAction
from epiaudit.models.enums import ComplianceGoal, ComplianceRating

logger = logging.getLogger(__name__)


class ComplianceAssessment(BaseModel):
    """Everything the compliance view needs for one audit."""

    audit_id: str = ""
    rating: ComplianceRating = ComplianceRating.NOT_COMPLIANT
    goal: ComplianceGoal | None = None
    technical: TechnicalReport = Field(default_factory=TechnicalReport)
    mandatory: list[CheckResult] = Field(default_factory=list)
    suggested_actions: list[ComplianceAction] = Field(default_factory=list)
    scope: ScopeRequirements = Field(default_factory=ScopeRequirements)


class ComplianceEngine:
    """Classify audits and run their technical and mandatory checks."""

    def classify(self, epi: float, benchmark: float | None) -> ComplianceRating:
        return classify(epi, benchmark)

    def check_technical(self, audit: AuditInput) -> TechnicalReport:
        """Run the technical sub-checks for *audit*."""
        return evaluate_technical(audit.compliance, audit.building_type)

    def assess(self, audit_or_record: AuditInput | AuditRecord) -> ComplianceAssessment:
        """Build a full assessment.

        For an ``AuditRecord`` the committed rating is used; for a bare
        ``AuditInput`` the rating is Not Compliant since no EPI has been
        derived yet.
        """
        if isinstance(audit_or_record, AuditRecord):
            audit = audit_or_record.audit
            rating = audit_or_record.metrics.compliance_rating
        else:
            audit = audit_or_record
            rating = ComplianceRating.NOT_COMPLIANT

        detail = audit.compliance
        goal = detail.goal if detail is not None else None
        technical = self.check_technical(audit)

        mandatory: list[CheckResult] = []
        actions: list[ComplianceAction] = []
        if detail is not None:
            mandatory = evaluate_mandatory(detail.mandatory, detail.goal)
            actions = suggest_actions(technical, detail.goal)

        logger.debug(
            "Assessed audit %s: %s, technical %s, %d suggested actions",
            audit.id, rating.value, technical.status, len(actions),
        )
        return ComplianceAssessment(
            audit_id=audit.id,
            rating=rating,
            goal=goal,
            technical=technical,
            mandatory=mandatory,
            suggested_actions=actions,
            scope=scope_requirements(audit.audit_level, goal),
        )
