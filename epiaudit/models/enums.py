"""Closed enumerations shared by the audit models and the engine."""

from __future__ import annotations

from enum import Enum


class AuditLevel(str, Enum):
    """ASHRAE audit depth, ordered from least to most detailed."""

    PEA = "Preliminary Energy-Use Analysis"
    LEVEL_1 = "Level 1 - Walk-Through"
    LEVEL_2 = "Level 2 - Energy Survey & Analysis"
    LEVEL_3 = "Level 3 - Detailed Analysis"

    @property
    def rank(self) -> int:
        return list(AuditLevel).index(self)


class BuildingType(str, Enum):
    OFFICE = "Business (Daytime)"
    RETAIL = "Shopping Complex"
    HOSPITAL = "Health Care"
    HOTEL = "Hospitality (Star Hotel)"
    SCHOOL = "Educational"
    ASSEMBLY = "Assembly"
    INDUSTRIAL = "Industrial"


class AuditStatus(str, Enum):
    DRAFT = "Draft"
    REVIEW = "Review"
    PUBLISHED = "Published"


class FuelType(str, Enum):
    ELECTRICITY = "Electricity"
    NATURAL_GAS = "Natural Gas"
    OIL = "Oil"
    DISTRICT_STEAM = "District Steam"


class ClimateZone(str, Enum):
    COMPOSITE = "Composite"
    HOT_DRY = "Hot-Dry"
    WARM_HUMID = "Warm-Humid"
    TEMPERATE = "Temperate"
    COLD = "Cold"


class ComplianceGoal(str, Enum):
    """Target tier a compliance programme is aiming for."""

    COMPLIANT = "ECSBC Compliant"
    PLUS = "ECSBC+"
    SUPER = "Super ECSBC"


class ComplianceRating(str, Enum):
    """Compliance tiers, declared from least to most stringent."""

    NOT_COMPLIANT = "Not Compliant"
    COMPLIANT = "ECBC Compliant"
    PLUS = "ECBC+"
    SUPER = "Super ECBC"

    @property
    def rank(self) -> int:
        return list(ComplianceRating).index(self)


class HvacSystemType(str, Enum):
    VRF = "VRF"
    CHILLER = "Chiller"
    SPLIT = "Split"
    PACKAGE = "Package"
    OTHER = "Other"


class MotorClass(str, Enum):
    IE2 = "IE2"
    IE3 = "IE3"
    IE4 = "IE4"
    IE5 = "IE5"


class MeasureCategory(str, Enum):
    LOW_COST = "No-Cost/Low-Cost"
    CAPITAL = "Capital Investment"
    OM = "O&M"


class CheckStatus(str, Enum):
    """Outcome of a single technical or mandatory sub-check."""

    COMPLIANT = "Compliant"
    NON_COMPLIANT = "Non-Compliant"
    NOT_APPLICABLE = "Not Applicable"
