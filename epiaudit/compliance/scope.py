"""Audit scope checklist derived from audit level and compliance goal."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epiaudit.models.enums import AuditLevel, ComplianceGoal

_LEVEL_ITEMS: dict[AuditLevel, list[str]] = {
    AuditLevel.PEA: [
        "Utility Bill Analysis (12-36 mo)",
        "Benchmarking (EPI)",
    ],
    AuditLevel.LEVEL_1: [
        "Utility Bill Analysis",
        "Walk-through Survey",
        "Low-Cost/No-Cost EEMs",
    ],
    AuditLevel.LEVEL_2: [
        "Detailed Energy Survey",
        "End-Use Breakdown",
        "Capital Intensive EEMs",
        "Financial Analysis",
    ],
}
_LEVEL_ITEMS[AuditLevel.LEVEL_3] = _LEVEL_ITEMS[AuditLevel.LEVEL_2]

_HIGH_GOALS = frozenset({ComplianceGoal.PLUS, ComplianceGoal.SUPER})


class ScopeRequirements(BaseModel):
    """Combined audit and compliance scope."""

    title: str = "Combined Audit & Compliance Scope"
    items: list[str] = Field(default_factory=list)
    under_scoped: bool = False
    """True when a Plus/Super goal is pursued with a PEA or Level 1 audit."""


def is_high_level_audit(level: AuditLevel) -> bool:
    return level.rank >= AuditLevel.LEVEL_2.rank


def is_detailed_audit(level: AuditLevel, goal: ComplianceGoal | None) -> bool:
    """Detailed technical inputs are expected for Level 2+ or a high goal."""
    return is_high_level_audit(level) or goal in _HIGH_GOALS


def scope_requirements(
    level: AuditLevel,
    goal: ComplianceGoal | None = None,
) -> ScopeRequirements:
    goal = goal or ComplianceGoal.COMPLIANT
    items = list(_LEVEL_ITEMS[level])

    under_scoped = False
    if goal in _HIGH_GOALS:
        items.append(f"Mandatory Checks ({goal.value})")
        items.append("LPD & Motor Efficiency Check")
        items.append("Detailed System Efficiency (COP/ISEER)")
        under_scoped = not is_high_level_audit(level)
    else:
        items.append("Mandatory Compliance Checks")

    return ScopeRequirements(items=items, under_scoped=under_scoped)
