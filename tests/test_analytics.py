"""Tests for audit financials and portfolio statistics."""

from __future__ import annotations

from datetime import date

import pytest

from epiaudit.analytics import (
    AuditFinancials,
    PortfolioFilter,
    PortfolioStats,
    available_years,
    payback_period,
)
from epiaudit.analytics.portfolio import audit_quarter
from epiaudit.models import AuditInput, AuditRecord, AuditStatus, BuildingType
from epiaudit.pipeline import IngestionPipeline


@pytest.fixture
def records() -> list[AuditRecord]:
    pipeline = IngestionPipeline()
    pipeline.seed()
    return pipeline.store.list()


class TestPayback:
    @pytest.mark.parametrize("cost, savings, expected", [
        (30000, 12000, 2.5),
        (1275000, 382500, 3.33),
        (100, 0, 0.0),
        (100, -5, 0.0),
        (1, 8, 0.13),
    ])
    def test_payback_period(self, cost, savings, expected) -> None:
        assert payback_period(cost, savings) == expected


class TestAuditFinancials:
    def test_from_seeded_audit(self, records) -> None:
        fin = AuditFinancials.from_audit(records[0])
        assert fin.audit_id == "1"
        assert fin.annual_energy_cost == 9996000
        assert fin.potential_savings == 654500
        assert fin.total_investment == 1292000
        assert fin.compliance_investment == 1100000
        assert fin.simple_payback == 2.0

    def test_cash_flow(self, records) -> None:
        flow = AuditFinancials.from_audit(records[0]).cash_flow()
        assert len(flow) == 11
        assert flow[0] == (0, -1292000)
        assert flow[-1] == (10, 5253000)

    def test_no_measures(self) -> None:
        fin = AuditFinancials.from_audit(AuditInput(id="empty"))
        assert fin.simple_payback == 0.0
        assert fin.cash_flow(years=2) == [(0, 0.0), (1, 0.0), (2, 0.0)]


class TestPortfolio:
    def test_all_records(self, records) -> None:
        stats = PortfolioStats.from_records(records)
        assert stats.count == 3
        assert stats.total_area == 220000
        assert stats.total_savings == 867000
        assert stats.weighted_epi == pytest.approx(289.016, abs=1e-3)
        assert stats.published_percent == 33
        assert stats.total_cost == pytest.approx(
            9996000 + 29070000 + 5950000, rel=1e-3,
        )

    def test_empty(self) -> None:
        stats = PortfolioStats.from_records([])
        assert stats.count == 0
        assert stats.weighted_epi == 0.0

    @pytest.mark.parametrize("portfolio_filter, ids", [
        (PortfolioFilter(), ["1", "2", "3"]),
        (PortfolioFilter(year=2023), ["1", "3"]),
        (PortfolioFilter(year=2023, quarter=4), ["1", "3"]),
        (PortfolioFilter(year=2024, quarter=2), []),
        (PortfolioFilter(building_type=BuildingType.SCHOOL), ["3"]),
    ])
    def test_filters(self, records, portfolio_filter, ids) -> None:
        assert [r.id for r in portfolio_filter.apply(records)] == ids

    def test_for_filter(self, records) -> None:
        stats = PortfolioStats.for_filter(records, PortfolioFilter(year=2024))
        assert stats.count == 1
        assert stats.weighted_epi == pytest.approx(333.6)

    def test_quarter_and_years(self, records) -> None:
        record = AuditRecord.draft(AuditInput(audit_date=date(2024, 4, 1)))
        assert audit_quarter(record) == 2
        assert available_years(records) == [2023, 2024]

    def test_published_share_rounds_half_up(self) -> None:
        records = [
            AuditRecord.draft(AuditInput(id=str(i), gross_floor_area=1))
            for i in range(8)
        ]
        published = records[0].audit.model_copy(update={"status": AuditStatus.PUBLISHED})
        records[0] = AuditRecord.draft(published)
        assert PortfolioStats.from_records(records).published_percent == 13
