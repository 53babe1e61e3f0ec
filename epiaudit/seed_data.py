"""Sample audits used to seed a fresh workspace.

Metrics are not stored here; seeding runs each audit through the pipeline.
Costs are in INR.
"""

from __future__ import annotations

from datetime import date

from epiaudit.models.audit import (
    AuditInput,
    ComplianceAction,
    ComplianceDetail,
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
    ClimateZone,
    ComplianceGoal,
    ComplianceRating,
    FuelType,
    HvacSystemType,
    MeasureCategory,
    MotorClass,
)

SEED_AUDITS: list[AuditInput] = [
    AuditInput(
        id="1",
        name="Corporate HQ - Building A",
        address="1791 Tullie Circle, N.E.",
        city="Atlanta, GA",
        year_built=1998,
        gross_floor_area=55000,
        exclusion_areas=ExclusionAreas(unconditioned_basement=5000),
        building_type=BuildingType.OFFICE,
        audit_level=AuditLevel.LEVEL_2,
        audit_date=date(2023, 10, 15),
        auditor_name="J. Kelsey",
        utility_data=[
            UtilityEntry(
                fuel_type=FuelType.ELECTRICITY, unit="kWh",
                annual_consumption=850000, annual_cost=8670000,
                peak_demand_kw=250, rate_structure="Time of Use",
            ),
            UtilityEntry(
                fuel_type=FuelType.NATURAL_GAS, unit="therms",
                annual_consumption=12000, annual_cost=1326000,
            ),
        ],
        compliance=ComplianceDetail(
            climate_zone=ClimateZone.COMPOSITE,
            goal=ComplianceGoal.PLUS,
            mandatory=MandatoryChecks(
                roof_reflectance=True,
                lighting_auto_shutoff=True,
                cooling_tower_control=True,
                transformer_star_rated=True,
                power_factor=True,
                plus_mandatory=True,
                plus_lpd_motor=True,
            ),
            technical=TechnicalParameters(
                window_area=2000, wall_area=8000,
                skylight_area=0, roof_area=5500,
                hvac_system_type=HvacSystemType.CHILLER,
                hvac_capacity_kwr=600, hvac_efficiency=6.1,
                lighting_area_type="Office", lpd=8.5,
                motor_class=MotorClass.IE3,
            ),
        ),
        benchmark_epi=240.0,
        end_use_breakdown=[
            EndUseBreakdown(category="Space Heating", kbtu=1200000, percentage=32),
            EndUseBreakdown(category="Space Cooling", kbtu=950000, percentage=25),
            EndUseBreakdown(category="Interior Lighting", kbtu=760000, percentage=20),
            EndUseBreakdown(category="Plug Loads", kbtu=450000, percentage=12),
            EndUseBreakdown(category="Water Heating", kbtu=150000, percentage=4),
            EndUseBreakdown(category="Pumps/Fans", kbtu=265000, percentage=7),
        ],
        measures=[
            EfficiencyMeasure(
                id="eem-1",
                title="LED Lighting Retrofit",
                description="Replace T8 fluorescents with LED tubes in open office areas.",
                category=MeasureCategory.CAPITAL,
                estimated_cost=1275000, estimated_savings=382500, payback_period=3.3,
            ),
            EfficiencyMeasure(
                id="eem-2",
                title="Adjust AHU Schedules",
                description="Reduce operating hours by 2 hours/day based on occupancy study.",
                category=MeasureCategory.LOW_COST,
                estimated_cost=17000, estimated_savings=272000, payback_period=0.06,
            ),
        ],
        compliance_actions=[
            ComplianceAction(
                id="c1",
                system="Lighting",
                description="Install occupancy sensors in all private offices and conference rooms.",
                investment=250000,
                responsible_party="Electrical Maintenance",
                target_rating=ComplianceRating.PLUS,
            ),
            ComplianceAction(
                id="c2",
                system="HVAC",
                description="Upgrade chiller plant management system for optimized sequencing.",
                investment=850000,
                responsible_party="HVAC Vendor",
                target_rating=ComplianceRating.PLUS,
            ),
        ],
        notes="Building envelope appears sound. Significant opportunity in lighting controls.",
        status=AuditStatus.PUBLISHED,
    ),
    AuditInput(
        id="2",
        name="Westside Medical Center",
        address="400 W Main St",
        city="Springfield, IL",
        year_built=2005,
        gross_floor_area=120000,
        building_type=BuildingType.HOSPITAL,
        audit_level=AuditLevel.PEA,
        audit_date=date(2024, 1, 10),
        auditor_name="M. Deru",
        utility_data=[
            UtilityEntry(
                fuel_type=FuelType.ELECTRICITY, unit="kWh",
                annual_consumption=2400000, annual_cost=24480000,
            ),
            UtilityEntry(
                fuel_type=FuelType.NATURAL_GAS, unit="therms",
                annual_consumption=45000, annual_cost=4590000,
            ),
        ],
        benchmark_epi=285.0,
        notes="Initial billing analysis shows high baseload. Recommend Level 2 audit.",
        status=AuditStatus.DRAFT,
    ),
    AuditInput(
        id="3",
        name="Northside Elementary",
        address="123 School Ln",
        city="Chicago, IL",
        year_built=1985,
        gross_floor_area=45000,
        building_type=BuildingType.SCHOOL,
        audit_level=AuditLevel.LEVEL_1,
        audit_date=date(2023, 11, 20),
        auditor_name="A. Admin",
        utility_data=[
            UtilityEntry(
                fuel_type=FuelType.ELECTRICITY, unit="kWh",
                annual_consumption=400000, annual_cost=4080000,
            ),
            UtilityEntry(
                fuel_type=FuelType.NATURAL_GAS, unit="therms",
                annual_consumption=20000, annual_cost=1870000,
            ),
        ],
        compliance=ComplianceDetail(
            climate_zone=ClimateZone.COLD,
            goal=ComplianceGoal.COMPLIANT,
            mandatory=MandatoryChecks(power_factor=True, plus_mandatory=False, plus_lpd_motor=False),
            technical=TechnicalParameters(
                hvac_system_type=HvacSystemType.SPLIT,
                lighting_area_type="School",
                motor_class=MotorClass.IE2,
            ),
        ),
        benchmark_epi=205.0,
        measures=[
            EfficiencyMeasure(
                id="eem-3",
                title="Boiler Tune-up",
                description="Optimize O2 trim settings.",
                category=MeasureCategory.OM,
                estimated_cost=127500, estimated_savings=212500, payback_period=0.6,
            ),
        ],
        compliance_actions=[
            ComplianceAction(
                id="c3",
                system="HVAC",
                description="Replace aging unit ventilators with a high-efficiency VRF system.",
                investment=4500000,
                responsible_party="Capital Projects Team",
                target_rating=ComplianceRating.COMPLIANT,
            ),
        ],
        notes="Old boilers, good candidates for replacement in 5 years.",
        status=AuditStatus.REVIEW,
    ),
]
