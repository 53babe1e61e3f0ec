"""Unit normalization and energy performance metrics."""

from epiaudit.metrics.calculator import (
    MetricsCalculator,
    cost_intensity,
    gross_intensity,
    net_area,
    net_intensity,
    round_half_up,
)
from epiaudit.metrics.normalizer import normalize_energy, to_kwh, total_cost

__all__ = [
    "MetricsCalculator",
    "cost_intensity",
    "gross_intensity",
    "net_area",
    "net_intensity",
    "normalize_energy",
    "round_half_up",
    "to_kwh",
    "total_cost",
]
