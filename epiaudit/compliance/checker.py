"""Mandatory checklist evaluation and remediation suggestions."""

from __future__ import annotations

from epiaudit.compliance.report import CheckResult, TechnicalReport
from epiaudit.compliance.thresholds import GOAL_TARGET_RATING
from epiaudit.models.audit import ComplianceAction, MandatoryChecks
from epiaudit.models.enums import CheckStatus, ComplianceGoal

# field -> (title, code reference)
_MANDATORY_ITEMS: dict[str, tuple[str, str]] = {
    "roof_reflectance": ("Roof solar reflectance above 0.70", "ECSBC 5.3.1"),
    "lighting_auto_shutoff": ("Interior lighting on automatic shutoff", "ECSBC 7.2.2"),
    "cooling_tower_control": ("Cooling tower fan speed control", "ECSBC 6.2.3"),
    "transformer_star_rated": ("Star rated transformers", "ECSBC 8.2.1"),
    "power_factor": ("Power factor between 0.97 and 0.99", "ECSBC 8.2.6"),
}

_PLUS_ITEMS: dict[str, tuple[str, str]] = {
    "plus_mandatory": ("ECBC+ mandatory requirements", "ECSBC+"),
    "plus_lpd_motor": ("LPD and motor efficiency at ECBC+ targets", "ECSBC+"),
}

# check name -> (system, responsible party, remediation)
_REMEDIATION: dict[str, tuple[str, str, str]] = {
    "window_wall_ratio": (
        "Envelope", "Architect",
        "Reduce glazing or add opaque wall area to bring WWR within {limit:g}%.",
    ),
    "skylight_roof_ratio": (
        "Envelope", "Architect",
        "Reduce skylight area to bring SRR within {limit:g}%.",
    ),
    "hvac_efficiency": (
        "HVAC", "HVAC Vendor",
        "Replace or upgrade the HVAC plant to reach an efficiency of {limit:g}.",
    ),
    "lighting_power_density": (
        "Lighting", "Electrical Maintenance",
        "Retrofit lighting to bring LPD within {limit:g} W/m².",
    ),
    "motor_efficiency": (
        "Motors", "Electrical Maintenance",
        "Replace motors with IE{limit:g} class units.",
    ),
    "solar_water_heating": (
        "Service Water Heating", "Facility Manager",
        "Add solar water heating to cover {limit:.0%} of hot water demand.",
    ),
}


def evaluate_mandatory(
    checks: MandatoryChecks,
    goal: ComplianceGoal = ComplianceGoal.COMPLIANT,
) -> list[CheckResult]:
    """Evaluate the Level 1 checklist.

    The two ECBC+ items are only evaluated for Plus and Super goals.
    """
    items = dict(_MANDATORY_ITEMS)
    if goal != ComplianceGoal.COMPLIANT:
        items.update(_PLUS_ITEMS)

    results: list[CheckResult] = []
    for field, (title, reference) in items.items():
        value = getattr(checks, field)
        if value is None:
            status = CheckStatus.NOT_APPLICABLE
            message = f"Not assessed ({reference})."
        elif value:
            status = CheckStatus.COMPLIANT
            message = f"Met ({reference})."
        else:
            status = CheckStatus.NON_COMPLIANT
            message = f"Not met ({reference})."
        results.append(CheckResult(name=field, title=title, status=status, message=message))
    return results


def suggest_actions(
    report: TechnicalReport,
    goal: ComplianceGoal = ComplianceGoal.COMPLIANT,
) -> list[ComplianceAction]:
    """Propose one remediation action per failing technical check."""
    target = GOAL_TARGET_RATING[goal]
    actions: list[ComplianceAction] = []

    for check in report.failures():
        remedy = _REMEDIATION.get(check.name)
        if remedy is None:
            continue
        system, party, template = remedy
        description = template.format(limit=check.limit or 0.0)
        actions.append(ComplianceAction(
            system=system,
            description=description,
            responsible_party=party,
            target_rating=target,
        ))
    return actions
