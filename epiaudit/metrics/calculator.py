"""EPI, MEPI and ECI from normalized audit inputs.

Usage::

    from epiaudit.metrics import MetricsCalculator

    metrics = MetricsCalculator().calculate(audit)

Every metric is reported as 0.0 when its denominator is not positive.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from epiaudit.compliance.classifier import classify
from epiaudit.config import ECI_DIGITS, EPI_DIGITS, MEPI_DIGITS
from epiaudit.metrics.normalizer import normalize_energy, sqft_to_m2, total_cost
from epiaudit.models.audit import AuditInput, DerivedMetrics, ExclusionAreas

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int) -> float:
    """Round *value* to *digits* decimals with exact ties going up.

    ``round_half_up(5.625, 2)`` is 5.63 where the builtin ``round`` gives 5.62.
    """
    quantum = Decimal(10) ** -digits
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def gross_intensity(energy_kwh: float, gross_area_sqft: float) -> float:
    """EPI: kWh per m² of gross floor area, one decimal."""
    area_m2 = sqft_to_m2(gross_area_sqft)
    if area_m2 <= 0:
        return 0.0
    return round_half_up(energy_kwh / area_m2, EPI_DIGITS)


def net_area(gross_area_sqft: float, exclusions: ExclusionAreas | None) -> float:
    """Gross area less excluded sub-areas, in ft².  May be zero or negative."""
    if exclusions is None:
        return gross_area_sqft
    return gross_area_sqft - exclusions.total()


def net_intensity(
    energy_kwh: float,
    gross_area_sqft: float,
    exclusions: ExclusionAreas | None = None,
) -> float:
    """MEPI: kWh per m² of net floor area, two decimals."""
    area_m2 = sqft_to_m2(net_area(gross_area_sqft, exclusions))
    if area_m2 <= 0:
        return 0.0
    return round_half_up(energy_kwh / area_m2, MEPI_DIGITS)


def cost_intensity(annual_cost: float, gross_area_sqft: float) -> float:
    """ECI: annual cost per ft² of gross floor area, two decimals."""
    if gross_area_sqft <= 0:
        return 0.0
    return round_half_up(annual_cost / gross_area_sqft, ECI_DIGITS)


class MetricsCalculator:
    """Derive the full metric set for an audit."""

    def calculate(self, audit: AuditInput) -> DerivedMetrics:
        energy = normalize_energy(audit.utility_data)
        cost = total_cost(audit.utility_data)

        epi = gross_intensity(energy, audit.gross_floor_area)
        mepi = net_intensity(energy, audit.gross_floor_area, audit.exclusion_areas)
        eci = cost_intensity(cost, audit.gross_floor_area)
        rating = classify(epi, audit.benchmark_epi)

        logger.debug(
            "Audit %s: %.1f kWh over %.1f ft2 -> EPI %s, MEPI %s, ECI %s, %s",
            audit.id, energy, audit.gross_floor_area, epi, mepi, eci, rating.value,
        )
        return DerivedMetrics(epi=epi, mepi=mepi, eci=eci, compliance_rating=rating)
