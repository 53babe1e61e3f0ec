"""Portfolio statistics across committed audits."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel

from epiaudit.metrics.calculator import round_half_up
from epiaudit.models.audit import AuditRecord
from epiaudit.models.enums import AuditStatus, BuildingType


def audit_quarter(record: AuditRecord) -> int:
    return (record.audit.audit_date.month - 1) // 3 + 1


class PortfolioFilter(BaseModel):
    """Optional filters; *None* matches everything."""

    building_type: BuildingType | None = None
    year: int | None = None
    quarter: int | None = None

    def matches(self, record: AuditRecord) -> bool:
        audit = record.audit
        if self.building_type is not None and audit.building_type != self.building_type:
            return False
        if self.year is not None and audit.audit_date.year != self.year:
            return False
        if self.quarter is not None and audit_quarter(record) != self.quarter:
            return False
        return True

    def apply(self, records: Iterable[AuditRecord]) -> list[AuditRecord]:
        return [r for r in records if self.matches(r)]


class PortfolioStats(BaseModel):
    """Aggregate KPIs for a set of audits."""

    count: int = 0
    total_area: float = 0.0
    """Gross floor area, ft²."""

    total_cost: float = 0.0
    total_savings: float = 0.0
    weighted_epi: float = 0.0
    """Area-weighted mean EPI."""

    published_percent: float = 0.0

    @classmethod
    def from_records(cls, records: Iterable[AuditRecord]) -> PortfolioStats:
        records = list(records)
        if not records:
            return cls()

        total_area = sum(r.audit.gross_floor_area for r in records)
        total_cost = sum(r.metrics.eci * r.audit.gross_floor_area for r in records)
        total_savings = sum(
            m.estimated_savings for r in records for m in r.audit.measures
        )
        weighted_epi = (
            sum(r.metrics.epi * r.audit.gross_floor_area for r in records) / total_area
            if total_area > 0 else 0.0
        )
        published = sum(1 for r in records if r.audit.status == AuditStatus.PUBLISHED)

        return cls(
            count=len(records),
            total_area=total_area,
            total_cost=total_cost,
            total_savings=total_savings,
            weighted_epi=weighted_epi,
            published_percent=round_half_up(published / len(records) * 100.0, 0),
        )

    @classmethod
    def for_filter(
        cls,
        records: Iterable[AuditRecord],
        portfolio_filter: PortfolioFilter | None = None,
    ) -> PortfolioStats:
        if portfolio_filter is not None:
            records = portfolio_filter.apply(records)
        return cls.from_records(records)


def available_years(records: Iterable[AuditRecord]) -> list[int]:
    return sorted({r.audit.audit_date.year for r in records})
