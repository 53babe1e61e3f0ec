"""Threshold tables for classification and technical sub-checks.

Every goal-dependent limit is keyed by ``ComplianceGoal`` so a new tier only
needs a new row in each table.
"""

from __future__ import annotations

from typing import NamedTuple

from epiaudit.models.enums import (
    BuildingType,
    ComplianceGoal,
    ComplianceRating,
    HvacSystemType,
    MotorClass,
)

# Max EPI/benchmark ratio per tier, strictest first.  Boundaries pass.
RATING_THRESHOLDS: list[tuple[float, ComplianceRating]] = [
    (0.60, ComplianceRating.SUPER),
    (0.80, ComplianceRating.PLUS),
    (1.00, ComplianceRating.COMPLIANT),
]

# Rating a goal is aiming for
GOAL_TARGET_RATING: dict[ComplianceGoal, ComplianceRating] = {
    ComplianceGoal.COMPLIANT: ComplianceRating.COMPLIANT,
    ComplianceGoal.PLUS: ComplianceRating.PLUS,
    ComplianceGoal.SUPER: ComplianceRating.SUPER,
}

# Envelope limits, percent (ECSBC 5.3)
MAX_WINDOW_WALL_RATIO = 40.0
MAX_SKYLIGHT_ROOF_RATIO = 5.0

# Lighting power density ceilings, W/m² (ECSBC 7.3.1)
LPD_LIMITS: dict[ComplianceGoal, float] = {
    ComplianceGoal.COMPLIANT: 9.5,
    ComplianceGoal.PLUS: 7.6,
    ComplianceGoal.SUPER: 5.0,
}

MOTOR_CLASS_LEVELS: dict[MotorClass, int] = {
    MotorClass.IE2: 2,
    MotorClass.IE3: 3,
    MotorClass.IE4: 4,
    MotorClass.IE5: 5,
}

# Minimum motor efficiency level (ECSBC 8.2.2)
REQUIRED_MOTOR_LEVELS: dict[ComplianceGoal, int] = {
    ComplianceGoal.COMPLIANT: 3,
    ComplianceGoal.PLUS: 4,
    ComplianceGoal.SUPER: 5,
}

# Minimum solar share of hot water demand
SOLAR_WATER_FRACTIONS: dict[ComplianceGoal, float] = {
    ComplianceGoal.COMPLIANT: 0.4,
    ComplianceGoal.PLUS: 0.6,
    ComplianceGoal.SUPER: 1.0,
}

# Building types with significant hot water demand
SOLAR_WATER_BUILDING_TYPES: frozenset[BuildingType] = frozenset(
    {BuildingType.HOTEL, BuildingType.HOSPITAL}
)


class HvacBand(NamedTuple):
    """Capacity band [min_capacity, max_capacity) for one system type."""

    system_type: HvacSystemType
    min_capacity_kwr: float
    max_capacity_kwr: float
    min_efficiency: float
    metric: str


# Simplified ECSBC Table 6.12; combinations not listed are not checked
HVAC_BANDS: list[HvacBand] = [
    HvacBand(HvacSystemType.CHILLER, 530.0, float("inf"), 5.8, "COP"),
    HvacBand(HvacSystemType.VRF, 0.0, 40.0, 5.4, "ISEER"),
]

# Plausible benchmark EPI band (kWh/m²/yr) per building type
BENCHMARK_RANGES: dict[BuildingType, tuple[float, float]] = {
    BuildingType.OFFICE: (30.0, 950.0),
    BuildingType.RETAIL: (30.0, 1200.0),
    BuildingType.HOSPITAL: (150.0, 1900.0),
    BuildingType.HOTEL: (45.0, 1500.0),
    BuildingType.SCHOOL: (30.0, 800.0),
    BuildingType.ASSEMBLY: (30.0, 800.0),
    BuildingType.INDUSTRIAL: (30.0, 3000.0),
}


def find_hvac_band(system_type: HvacSystemType, capacity_kwr: float) -> HvacBand | None:
    """Return the band covering *system_type* at *capacity_kwr*, if any."""
    for band in HVAC_BANDS:
        if (
            band.system_type == system_type
            and band.min_capacity_kwr <= capacity_kwr < band.max_capacity_kwr
        ):
            return band
    return None
