"""Record rules: required name, floor area, year built, benchmark band."""

from __future__ import annotations

from datetime import date

from epiaudit.compliance.thresholds import BENCHMARK_RANGES
from epiaudit.config import MAX_YEAR_BUILT_AHEAD, MIN_YEAR_BUILT
from epiaudit.models.audit import AuditInput
from epiaudit.validation.rules.base import ValidationIssue, ValidationRule


class NameRequired(ValidationRule):
    """Project name must not be blank."""

    @property
    def name(self) -> str:
        return "record.name_required"

    @property
    def description(self) -> str:
        return "Project name must be non-empty after trimming."

    def check(self, audit: AuditInput) -> list[ValidationIssue]:
        if audit.name.strip():
            return []
        return [ValidationIssue(self.name, "name", "Project name is required.")]


class PositiveFloorArea(ValidationRule):
    """Gross floor area must be strictly positive."""

    @property
    def name(self) -> str:
        return "record.positive_floor_area"

    @property
    def description(self) -> str:
        return "Gross floor area must be greater than zero."

    def check(self, audit: AuditInput) -> list[ValidationIssue]:
        if audit.gross_floor_area > 0:
            return []
        return [ValidationIssue(
            self.name, "gross_floor_area", "Floor area must be positive.",
        )]


class YearBuiltRange(ValidationRule):
    """Year built must lie in [1800, current year + 1].

    Parameters
    ----------
    current_year:
        Fixed reference year.  Defaults to today's year at check time.
    """

    def __init__(self, current_year: int | None = None) -> None:
        self.current_year = current_year

    @property
    def name(self) -> str:
        return "record.year_built_range"

    @property
    def description(self) -> str:
        return "Year built must be plausible."

    def check(self, audit: AuditInput) -> list[ValidationIssue]:
        current = self.current_year or date.today().year
        latest = current + MAX_YEAR_BUILT_AHEAD
        if MIN_YEAR_BUILT <= audit.year_built <= latest:
            return []
        return [ValidationIssue(
            self.name,
            "year_built",
            f"Invalid Year Built: must be between {MIN_YEAR_BUILT} and {latest}.",
        )]


class BenchmarkRange(ValidationRule):
    """A supplied benchmark EPI must be plausible for the building type."""

    @property
    def name(self) -> str:
        return "record.benchmark_range"

    @property
    def description(self) -> str:
        return "Benchmark EPI must fall within the band for the building type."

    def check(self, audit: AuditInput) -> list[ValidationIssue]:
        benchmark = audit.benchmark_epi
        if not benchmark:
            return []

        band = BENCHMARK_RANGES.get(audit.building_type)
        if band is None:
            return []

        lo, hi = band
        if lo <= benchmark <= hi:
            return []
        return [ValidationIssue(
            self.name,
            "benchmark_epi",
            f"Benchmark EPI for {audit.building_type.value} should be between "
            f"{lo:g} and {hi:g} kWh/m²/yr.",
        )]


class RecordRules:
    """Collection of all record validation rules."""

    @staticmethod
    def all_rules(current_year: int | None = None) -> list[ValidationRule]:
        return [
            NameRequired(),
            PositiveFloorArea(),
            YearBuiltRange(current_year),
            BenchmarkRange(),
        ]
