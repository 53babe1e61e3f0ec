"""Map an EPI and its benchmark onto a compliance tier."""

from __future__ import annotations

from epiaudit.compliance.thresholds import RATING_THRESHOLDS
from epiaudit.models.enums import ComplianceRating


def classify(epi: float, benchmark: float | None) -> ComplianceRating:
    """Return the tier earned by *epi* against *benchmark*.

    Without a positive benchmark there is nothing to compare against and the
    result is Not Compliant.  A ratio exactly on a boundary earns the
    stricter tier.
    """
    if not benchmark or benchmark <= 0:
        return ComplianceRating.NOT_COMPLIANT

    ratio = epi / benchmark
    for max_ratio, rating in RATING_THRESHOLDS:
        if ratio <= max_ratio:
            return rating
    return ComplianceRating.NOT_COMPLIANT


def meets(rating: ComplianceRating, target: ComplianceRating) -> bool:
    """True when *rating* is at least as stringent as *target*."""
    return rating.rank >= target.rank
