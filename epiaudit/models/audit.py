"""Audit models: authoritative user input, engine-derived metrics, and the
record that joins the two.

The input model deliberately carries no metric fields.  ``DerivedMetrics``
is only produced by the engine and ``AuditRecord`` is frozen, so a writer
cannot hand-set EPI or the compliance rating as part of a save.
"""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from epiaudit.models.enums import (
    AuditLevel,
    AuditStatus,
    BuildingType,
    ClimateZone,
    ComplianceGoal,
    ComplianceRating,
    FuelType,
    HvacSystemType,
    MeasureCategory,
    MotorClass,
)


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class UtilityEntry(BaseModel):
    """One fuel's annual consumption and cost, in the unit it was billed in."""

    fuel_type: FuelType = FuelType.ELECTRICITY
    unit: str = "kWh"
    annual_consumption: float = Field(default=0.0, ge=0)
    annual_cost: float = Field(default=0.0, ge=0)
    peak_demand_kw: float | None = Field(default=None, ge=0)
    """Peak demand (kW), collected for Level 2+ audits."""

    rate_structure: str | None = None


class ExclusionAreas(BaseModel):
    """Non-conditioned sub-areas (ft²) subtracted from gross area for MEPI.

    Values are not sign- or size-checked.
    """

    unconditioned_basement: float = 0.0
    refuge_area: float = 0.0
    stilt_parking: float = 0.0

    def total(self) -> float:
        return self.unconditioned_basement + self.refuge_area + self.stilt_parking


class MandatoryChecks(BaseModel):
    """Level 1 pass/fail checklist."""

    roof_reflectance: bool = False
    """Roof solar reflectance above 0.70."""

    lighting_auto_shutoff: bool = False
    """90% of interior lighting on automatic shutoff."""

    cooling_tower_control: bool = False
    """Cooling tower fans with variable speed control."""

    transformer_star_rated: bool = False
    power_factor: bool = False
    """Power factor held between 0.97 and 0.99."""

    plus_mandatory: bool | None = None
    plus_lpd_motor: bool | None = None


class TechnicalParameters(BaseModel):
    """Level 2 technical inputs used by the sub-checks."""

    window_area: float = 0.0
    wall_area: float = 0.0
    skylight_area: float = 0.0
    roof_area: float = 0.0

    hvac_system_type: HvacSystemType = HvacSystemType.CHILLER
    hvac_capacity_kwr: float = 0.0
    hvac_efficiency: float = 0.0
    """COP for chillers, ISEER for VRF."""

    lighting_area_type: str = "Office"
    lpd: float = 0.0
    """Lighting power density, W/m²."""

    motor_class: MotorClass = MotorClass.IE2

    hot_water_demand_lpd: float = 0.0
    solar_water_capacity_lpd: float = 0.0


class ComplianceDetail(BaseModel):
    climate_zone: ClimateZone = ClimateZone.COMPOSITE
    goal: ComplianceGoal = ComplianceGoal.COMPLIANT
    mandatory: MandatoryChecks = Field(default_factory=MandatoryChecks)
    technical: TechnicalParameters = Field(default_factory=TechnicalParameters)


class ComplianceAction(BaseModel):
    """A remediation step toward a target tier."""

    id: str = Field(default_factory=_new_id)
    system: str = ""
    description: str = ""
    investment: float = 0.0
    responsible_party: str = ""
    target_rating: ComplianceRating = ComplianceRating.COMPLIANT


class EfficiencyMeasure(BaseModel):
    """Energy efficiency measure (EEM)."""

    id: str = Field(default_factory=_new_id)
    title: str = ""
    description: str = ""
    estimated_cost: float = 0.0
    estimated_savings: float = 0.0
    """Annual savings."""

    payback_period: float = 0.0
    """Years."""

    category: MeasureCategory = MeasureCategory.LOW_COST


class EndUseBreakdown(BaseModel):
    category: str
    kbtu: float = 0.0
    percentage: float = 0.0


class AuditInput(BaseModel):
    """Everything a user may edit on an audit."""

    id: str = Field(default_factory=_new_id)
    name: str = ""
    address: str = ""
    city: str = ""
    year_built: int = 2000
    gross_floor_area: float = 0.0
    """Gross floor area, ft²."""

    exclusion_areas: ExclusionAreas | None = None
    building_type: BuildingType = BuildingType.OFFICE
    audit_level: AuditLevel = AuditLevel.LEVEL_1
    audit_date: date = Field(default_factory=date.today)
    auditor_name: str = ""

    utility_data: list[UtilityEntry] = Field(default_factory=list)
    compliance: ComplianceDetail | None = None
    benchmark_epi: float | None = None
    """Externally supplied reference EPI (kWh/m²/yr) for the building type."""

    compliance_actions: list[ComplianceAction] = Field(default_factory=list)
    measures: list[EfficiencyMeasure] = Field(default_factory=list)
    end_use_breakdown: list[EndUseBreakdown] = Field(default_factory=list)
    notes: str = ""
    status: AuditStatus = AuditStatus.DRAFT


class DerivedMetrics(BaseModel):
    """Metrics owned by the engine."""

    model_config = ConfigDict(frozen=True)

    epi: float = 0.0
    """Gross energy performance index, kWh/m²/yr."""

    mepi: float = 0.0
    """Net-area energy performance index, kWh/m²/yr."""

    eci: float = 0.0
    """Energy cost index, cost per ft² per year."""

    compliance_rating: ComplianceRating = ComplianceRating.NOT_COMPLIANT


class AuditRecord(BaseModel):
    """An audit's input joined with the metrics the engine derived from it."""

    model_config = ConfigDict(frozen=True)

    audit: AuditInput
    metrics: DerivedMetrics = Field(default_factory=DerivedMetrics)

    @property
    def id(self) -> str:
        return self.audit.id

    @classmethod
    def draft(cls, audit: AuditInput) -> AuditRecord:
        """A not-yet-ingested record with default metrics."""
        return cls(audit=audit, metrics=DerivedMetrics())
