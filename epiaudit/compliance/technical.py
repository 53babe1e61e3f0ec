"""Technical sub-checks: envelope, HVAC, lighting, motors, solar water heating.

Each check is independent.  A check whose inputs are missing or zero reports
Not Applicable instead of passing or failing, so the whole evaluation is safe
on partially filled audits.
"""

from __future__ import annotations

from epiaudit.compliance.report import CheckResult, TechnicalReport
from epiaudit.compliance.thresholds import (
    LPD_LIMITS,
    MAX_SKYLIGHT_ROOF_RATIO,
    MAX_WINDOW_WALL_RATIO,
    MOTOR_CLASS_LEVELS,
    REQUIRED_MOTOR_LEVELS,
    SOLAR_WATER_BUILDING_TYPES,
    SOLAR_WATER_FRACTIONS,
    find_hvac_band,
)
from epiaudit.models.audit import ComplianceDetail, TechnicalParameters
from epiaudit.models.enums import BuildingType, CheckStatus, ComplianceGoal

CHECK_TITLES: dict[str, str] = {
    "window_wall_ratio": "Window-to-Wall Ratio",
    "skylight_roof_ratio": "Skylight-to-Roof Ratio",
    "hvac_efficiency": "HVAC Efficiency",
    "lighting_power_density": "Lighting Power Density",
    "motor_efficiency": "Motor Efficiency",
    "solar_water_heating": "Solar Water Heating",
}


def _ratio_percent(part: float, rest: float) -> float | None:
    total = part + rest
    if total <= 0:
        return None
    return part / total * 100.0


def _result(name: str, status: CheckStatus, **kwargs) -> CheckResult:
    return CheckResult(name=name, title=CHECK_TITLES[name], status=status, **kwargs)


def check_window_wall_ratio(params: TechnicalParameters) -> CheckResult:
    wwr = _ratio_percent(params.window_area, params.wall_area)
    if wwr is None:
        return _result(
            "window_wall_ratio", CheckStatus.NOT_APPLICABLE,
            limit=MAX_WINDOW_WALL_RATIO, message="No window or wall area given.",
        )
    if wwr > MAX_WINDOW_WALL_RATIO:
        return _result(
            "window_wall_ratio", CheckStatus.NON_COMPLIANT,
            value=wwr, limit=MAX_WINDOW_WALL_RATIO,
            message=f"WWR {wwr:.1f}% exceeds {MAX_WINDOW_WALL_RATIO:g}%.",
        )
    return _result(
        "window_wall_ratio", CheckStatus.COMPLIANT,
        value=wwr, limit=MAX_WINDOW_WALL_RATIO,
        message=f"WWR {wwr:.1f}% within {MAX_WINDOW_WALL_RATIO:g}%.",
    )


def check_skylight_roof_ratio(params: TechnicalParameters) -> CheckResult:
    srr = _ratio_percent(params.skylight_area, params.roof_area)
    if srr is None:
        return _result(
            "skylight_roof_ratio", CheckStatus.NOT_APPLICABLE,
            limit=MAX_SKYLIGHT_ROOF_RATIO, message="No skylight or roof area given.",
        )
    if srr > MAX_SKYLIGHT_ROOF_RATIO:
        return _result(
            "skylight_roof_ratio", CheckStatus.NON_COMPLIANT,
            value=srr, limit=MAX_SKYLIGHT_ROOF_RATIO,
            message=f"SRR {srr:.1f}% exceeds {MAX_SKYLIGHT_ROOF_RATIO:g}%.",
        )
    return _result(
        "skylight_roof_ratio", CheckStatus.COMPLIANT,
        value=srr, limit=MAX_SKYLIGHT_ROOF_RATIO,
        message=f"SRR {srr:.1f}% within {MAX_SKYLIGHT_ROOF_RATIO:g}%.",
    )


def check_hvac_efficiency(params: TechnicalParameters) -> CheckResult:
    """Check system efficiency against its capacity band.

    Type/capacity combinations without a band are out of scope and reported
    Compliant.
    """
    if params.hvac_capacity_kwr <= 0:
        return _result(
            "hvac_efficiency", CheckStatus.NOT_APPLICABLE,
            message="No HVAC capacity given.",
        )

    band = find_hvac_band(params.hvac_system_type, params.hvac_capacity_kwr)
    if band is None:
        return _result(
            "hvac_efficiency", CheckStatus.COMPLIANT,
            value=params.hvac_efficiency,
            message=(
                f"No efficiency band for {params.hvac_system_type.value} "
                f"at {params.hvac_capacity_kwr:g} kWr."
            ),
        )
    if params.hvac_efficiency < band.min_efficiency:
        return _result(
            "hvac_efficiency", CheckStatus.NON_COMPLIANT,
            value=params.hvac_efficiency, limit=band.min_efficiency,
            message=(
                f"Low {band.metric}: {params.hvac_efficiency:g} below "
                f"{band.min_efficiency:g}."
            ),
        )
    return _result(
        "hvac_efficiency", CheckStatus.COMPLIANT,
        value=params.hvac_efficiency, limit=band.min_efficiency,
        message=f"{band.metric} {params.hvac_efficiency:g} meets {band.min_efficiency:g}.",
    )


def check_lighting_power_density(
    params: TechnicalParameters, goal: ComplianceGoal,
) -> CheckResult:
    """Only an LPD of exactly 0 means not supplied; negatives fail."""
    limit = LPD_LIMITS[goal]
    if params.lpd == 0:
        return _result(
            "lighting_power_density", CheckStatus.NOT_APPLICABLE,
            limit=limit, message="No lighting power density given.",
        )
    if params.lpd < 0:
        return _result(
            "lighting_power_density", CheckStatus.NON_COMPLIANT,
            value=params.lpd, limit=limit,
            message=f"LPD {params.lpd:g} W/m² is not a valid density.",
        )
    if params.lpd > limit:
        return _result(
            "lighting_power_density", CheckStatus.NON_COMPLIANT,
            value=params.lpd, limit=limit,
            message=f"LPD {params.lpd:g} W/m² exceeds {limit:g} W/m².",
        )
    return _result(
        "lighting_power_density", CheckStatus.COMPLIANT,
        value=params.lpd, limit=limit,
        message=f"LPD {params.lpd:g} W/m² within {limit:g} W/m².",
    )


def check_motor_efficiency(
    params: TechnicalParameters, goal: ComplianceGoal,
) -> CheckResult:
    required = REQUIRED_MOTOR_LEVELS[goal]
    level = MOTOR_CLASS_LEVELS.get(params.motor_class, 0)
    if level < required:
        return _result(
            "motor_efficiency", CheckStatus.NON_COMPLIANT,
            value=level, limit=required,
            message=f"{params.motor_class.value} is below the required IE{required}.",
        )
    return _result(
        "motor_efficiency", CheckStatus.COMPLIANT,
        value=level, limit=required,
        message=f"{params.motor_class.value} meets the required IE{required}.",
    )


def check_solar_water_heating(
    params: TechnicalParameters,
    goal: ComplianceGoal,
    building_type: BuildingType,
) -> CheckResult:
    fraction = SOLAR_WATER_FRACTIONS[goal]
    if building_type not in SOLAR_WATER_BUILDING_TYPES:
        return _result(
            "solar_water_heating", CheckStatus.NOT_APPLICABLE,
            message=f"Not required for {building_type.value}.",
        )
    if params.hot_water_demand_lpd <= 0:
        return _result(
            "solar_water_heating", CheckStatus.NOT_APPLICABLE,
            limit=fraction, message="No hot water demand given.",
        )

    share = params.solar_water_capacity_lpd / params.hot_water_demand_lpd
    if share < fraction:
        return _result(
            "solar_water_heating", CheckStatus.NON_COMPLIANT,
            value=share, limit=fraction,
            message=f"Solar covers {share:.0%} of demand; {fraction:.0%} required.",
        )
    return _result(
        "solar_water_heating", CheckStatus.COMPLIANT,
        value=share, limit=fraction,
        message=f"Solar covers {share:.0%} of demand.",
    )


def evaluate_technical(
    detail: ComplianceDetail | None,
    building_type: BuildingType = BuildingType.OFFICE,
) -> TechnicalReport:
    """Run every technical sub-check for an audit's compliance detail.

    Parameters
    ----------
    detail:
        The audit's compliance detail.  When *None* every check is
        Not Applicable.
    building_type:
        Decides whether solar water heating applies.

    Returns
    -------
    TechnicalReport
    """
    if detail is None:
        return TechnicalReport(
            checks=[
                _result(name, CheckStatus.NOT_APPLICABLE, message="No compliance data.")
                for name in CHECK_TITLES
            ],
        )

    params = detail.technical
    goal = detail.goal
    checks = [
        check_window_wall_ratio(params),
        check_skylight_roof_ratio(params),
        check_hvac_efficiency(params),
        check_lighting_power_density(params, goal),
        check_motor_efficiency(params, goal),
        check_solar_water_heating(params, goal, building_type),
    ]

    return TechnicalReport(
        window_wall_ratio=_ratio_percent(params.window_area, params.wall_area) or 0.0,
        skylight_roof_ratio=_ratio_percent(params.skylight_area, params.roof_area) or 0.0,
        lpd_limit=LPD_LIMITS[goal],
        required_motor_level=REQUIRED_MOTOR_LEVELS[goal],
        checks=checks,
    )
