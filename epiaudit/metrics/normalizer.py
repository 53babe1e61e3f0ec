"""Unit normalization: fuel consumption to kWh, floor area to m².

Conversions use fixed factors only.  Anything not in the table is passed
through unchanged as an approximation rather than rejected.
"""

from __future__ import annotations

import logging
from typing import Iterable

from epiaudit.config import BASE_ENERGY_UNIT, SQFT_TO_M2
from epiaudit.models.audit import UtilityEntry
from epiaudit.models.enums import FuelType

logger = logging.getLogger(__name__)

# (fuel, unit) -> kWh per unit
KWH_CONVERSION: dict[tuple[FuelType, str], float] = {
    (FuelType.ELECTRICITY, "kwh"): 1.0,
    (FuelType.NATURAL_GAS, "therms"): 29.3071,
    (FuelType.OIL, "gallons"): 40.6,
    (FuelType.DISTRICT_STEAM, "mmbtu"): 293.071,
}

_RECOMMENDED_UNITS: dict[FuelType, str] = {
    FuelType.ELECTRICITY: BASE_ENERGY_UNIT,
    FuelType.NATURAL_GAS: "therms",
    FuelType.OIL: "gallons",
    FuelType.DISTRICT_STEAM: "MMBtu",
}


def conversion_factor(fuel_type: FuelType, unit: str) -> float | None:
    """Return the kWh factor for *fuel_type* billed in *unit*, or None."""
    return KWH_CONVERSION.get((fuel_type, unit.strip().lower()))


def to_kwh(entry: UtilityEntry) -> float:
    """Annual consumption of a single entry expressed in kWh."""
    factor = conversion_factor(entry.fuel_type, entry.unit)
    if factor is None:
        logger.debug(
            "No conversion for %s in '%s'; using raw consumption",
            entry.fuel_type.value, entry.unit,
        )
        return entry.annual_consumption
    return entry.annual_consumption * factor


def normalize_energy(entries: Iterable[UtilityEntry]) -> float:
    """Total annual energy across all entries, in kWh."""
    return sum((to_kwh(e) for e in entries), 0.0)


def total_cost(entries: Iterable[UtilityEntry]) -> float:
    return sum((e.annual_cost for e in entries), 0.0)


def sqft_to_m2(area_sqft: float) -> float:
    return area_sqft * SQFT_TO_M2


def recommended_unit(fuel_type: FuelType) -> str:
    """The billing unit the conversion table expects for *fuel_type*."""
    return _RECOMMENDED_UNITS.get(fuel_type, "")


def with_recommended_units(entries: Iterable[UtilityEntry]) -> list[UtilityEntry]:
    """Copy *entries* with each unit replaced by its fuel's recommended unit."""
    return [
        e.model_copy(update={"unit": recommended_unit(e.fuel_type) or e.unit})
        for e in entries
    ]
