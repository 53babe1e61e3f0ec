"""Audit data model."""

from epiaudit.models.audit import (
    AuditInput,
    AuditRecord,
    ComplianceAction,
    ComplianceDetail,
    DerivedMetrics,
    EfficiencyMeasure,
    EndUseBreakdown,
    ExclusionAreas,
    MandatoryChecks,
    TechnicalParameters,
    UtilityEntry,
)
from epiaudit.models.enums import (
    AuditLevel,
    AuditStatus,
    BuildingType,
    CheckStatus,
    ClimateZone,
    ComplianceGoal,
    ComplianceRating,
    FuelType,
    HvacSystemType,
    MeasureCategory,
    MotorClass,
)

__all__ = [
    "AuditInput",
    "AuditLevel",
    "AuditRecord",
    "AuditStatus",
    "BuildingType",
    "CheckStatus",
    "ClimateZone",
    "ComplianceAction",
    "ComplianceDetail",
    "ComplianceGoal",
    "ComplianceRating",
    "DerivedMetrics",
    "EfficiencyMeasure",
    "EndUseBreakdown",
    "ExclusionAreas",
    "FuelType",
    "HvacSystemType",
    "MandatoryChecks",
    "MeasureCategory",
    "MotorClass",
    "TechnicalParameters",
    "UtilityEntry",
]
