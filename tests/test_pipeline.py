"""Tests for the ingestion pipeline, the record store and sample seeding."""

from __future__ import annotations

import pydantic
import pytest

from epiaudit.models import (
    AuditInput,
    AuditRecord,
    ComplianceRating,
    DerivedMetrics,
    ExclusionAreas,
    FuelType,
    UtilityEntry,
)
from epiaudit.pipeline import AuditStore, IngestionPipeline
from epiaudit.seed_data import SEED_AUDITS
from epiaudit.validation import InputValidator


@pytest.fixture
def pipeline() -> IngestionPipeline:
    return IngestionPipeline(validator=InputValidator(current_year=2025))


@pytest.fixture
def hq_audit() -> AuditInput:
    return AuditInput(
        id="hq",
        name="Corporate HQ",
        gross_floor_area=55000,
        exclusion_areas=ExclusionAreas(unconditioned_basement=5000),
        utility_data=[
            UtilityEntry(
                fuel_type=FuelType.ELECTRICITY, unit="kWh",
                annual_consumption=850000, annual_cost=8670000,
            ),
            UtilityEntry(
                fuel_type=FuelType.NATURAL_GAS, unit="therms",
                annual_consumption=12000, annual_cost=1326000,
            ),
        ],
        benchmark_epi=240.0,
    )


# ---------------------------------------------------------------------------
# AuditStore
# ---------------------------------------------------------------------------


class TestAuditStore:
    def test_upsert_appends_then_replaces(self) -> None:
        store = AuditStore()
        first = AuditRecord.draft(AuditInput(id="a", name="one"))
        second = AuditRecord.draft(AuditInput(id="b", name="two"))
        assert store.upsert(first) is False
        assert store.upsert(second) is False

        updated = AuditRecord.draft(AuditInput(id="a", name="one again"))
        assert store.upsert(updated) is True
        assert store.ids() == ["a", "b"]
        assert store.get("a").audit.name == "one again"

    def test_upsert_keeps_own_copy(self) -> None:
        store = AuditStore()
        record = AuditRecord.draft(AuditInput(id="a", name="one"))
        store.upsert(record)
        record.audit.name = "edited outside"
        assert store.get("a").audit.name == "one"
        assert store.get("a") is not store.get("a")

    def test_lookup(self) -> None:
        store = AuditStore([AuditRecord.draft(AuditInput(id="x"))])
        assert len(store) == 1
        assert "x" in store
        assert "y" not in store
        assert store.get("y") is None
        assert [r.id for r in store] == ["x"]


# ---------------------------------------------------------------------------
# IngestionPipeline
# ---------------------------------------------------------------------------


class TestIngest:
    def test_valid_audit_committed_with_metrics(self, pipeline, hq_audit) -> None:
        result = pipeline.ingest(hq_audit)
        assert result.success
        assert result.errors == {}
        record = result.record
        assert record.metrics.epi == 235.2
        assert record.metrics.mepi == pytest.approx(258.70)
        assert record.metrics.eci == 181.75
        assert record.metrics.compliance_rating == ComplianceRating.COMPLIANT
        assert pipeline.store.get("hq") == record

    def test_invalid_audit_leaves_store_untouched(self, pipeline) -> None:
        result = pipeline.ingest(AuditInput(name="", gross_floor_area=1000))
        assert not result.success
        assert result.record is None
        assert result.errors == {"name": "Project name is required."}
        assert len(pipeline.store) == 0

    def test_invalid_update_keeps_previous_record(self, pipeline, hq_audit) -> None:
        committed = pipeline.ingest(hq_audit).record
        broken = hq_audit.model_copy(update={"gross_floor_area": 0})
        assert not pipeline.ingest(broken).success
        assert pipeline.store.get("hq") == committed

    def test_resave_replaces_in_place(self, pipeline, hq_audit) -> None:
        pipeline.ingest(AuditInput(id="other", name="Other", gross_floor_area=10))
        pipeline.ingest(hq_audit)
        renamed = hq_audit.model_copy(update={"name": "Renamed HQ"})
        pipeline.ingest(renamed)
        assert pipeline.store.ids() == ["other", "hq"]
        assert pipeline.store.get("hq").audit.name == "Renamed HQ"

    def test_idempotent(self, pipeline, hq_audit) -> None:
        first = pipeline.ingest(hq_audit).record
        second = pipeline.ingest(hq_audit).record
        assert first.metrics == second.metrics
        assert len(pipeline.store) == 1

    def test_reingesting_committed_record_is_stable(self, pipeline, hq_audit) -> None:
        record = pipeline.ingest(hq_audit).record
        again = pipeline.ingest(record).record
        assert again == record

    def test_hand_set_metrics_are_discarded(self, pipeline, hq_audit) -> None:
        forged = AuditRecord(
            audit=hq_audit,
            metrics=DerivedMetrics(epi=1.0, compliance_rating=ComplianceRating.SUPER),
        )
        result = pipeline.ingest(forged)
        assert result.record.metrics.epi == 235.2
        assert result.record.metrics.compliance_rating == ComplianceRating.COMPLIANT

    def test_record_is_frozen(self, pipeline, hq_audit) -> None:
        record = pipeline.ingest(hq_audit).record
        with pytest.raises(pydantic.ValidationError):
            record.metrics = DerivedMetrics(epi=1.0)
        with pytest.raises(pydantic.ValidationError):
            record.metrics.epi = 1.0

    def test_caller_mutation_does_not_leak_into_store(self, pipeline, hq_audit) -> None:
        pipeline.ingest(hq_audit)
        hq_audit.name = "Changed after save"
        hq_audit.utility_data.clear()
        stored = pipeline.store.get("hq")
        assert stored.audit.name == "Corporate HQ"
        assert len(stored.audit.utility_data) == 2

    def test_returned_record_edits_do_not_reach_store(self, pipeline, hq_audit) -> None:
        result = pipeline.ingest(hq_audit)
        result.record.audit.gross_floor_area = -1.0
        result.record.audit.name = ""
        result.record.audit.utility_data.clear()

        stored = pipeline.store.get("hq")
        assert stored.audit.gross_floor_area == 55000
        assert stored.audit.name == "Corporate HQ"
        assert len(stored.audit.utility_data) == 2
        assert stored.metrics.epi == 235.2

    def test_store_reads_are_copies(self, pipeline, hq_audit) -> None:
        pipeline.ingest(hq_audit)
        pipeline.store.get("hq").audit.gross_floor_area = 0
        pipeline.store.list()[0].audit.name = ""
        for record in pipeline.store:
            record.audit.exclusion_areas.unconditioned_basement = 1e9

        stored = pipeline.store.get("hq")
        assert stored.audit.gross_floor_area == 55000
        assert stored.audit.name == "Corporate HQ"
        assert stored.audit.exclusion_areas.unconditioned_basement == 5000
        assert stored.metrics.mepi == pytest.approx(258.70)

    def test_unknown_unit_uses_raw_consumption(self, pipeline) -> None:
        audit = AuditInput(
            name="Gas in kWh",
            gross_floor_area=10000,
            utility_data=[UtilityEntry(
                fuel_type=FuelType.NATURAL_GAS, unit="kWh", annual_consumption=92903,
            )],
        )
        record = pipeline.ingest(audit).record
        assert record.metrics.epi == pytest.approx(100.0)

    def test_process_does_not_commit(self, pipeline, hq_audit) -> None:
        record = pipeline.process(hq_audit)
        assert record.metrics.epi == 235.2
        assert len(pipeline.store) == 0

    def test_latency_sleeps_before_ingest(self, monkeypatch, hq_audit) -> None:
        calls: list[float] = []
        monkeypatch.setattr(
            "epiaudit.pipeline.ingestion.time.sleep", lambda s: calls.append(s),
        )
        IngestionPipeline(latency_seconds=0.25).ingest(hq_audit)
        assert calls == [0.25]

    def test_result_to_dict(self, pipeline, hq_audit) -> None:
        ok = pipeline.ingest(hq_audit).to_dict()
        assert ok["success"] is True
        assert ok["record"]["metrics"]["epi"] == 235.2

        bad = pipeline.ingest(AuditInput()).to_dict()
        assert bad["success"] is False
        assert "name" in bad["errors"]


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------


class TestSeed:
    def test_seed_commits_all_samples(self) -> None:
        pipeline = IngestionPipeline()
        assert pipeline.seed() == len(SEED_AUDITS) == 3
        assert pipeline.store.ids() == ["1", "2", "3"]

    def test_seeded_metrics(self) -> None:
        pipeline = IngestionPipeline()
        pipeline.seed()
        hq = pipeline.store.get("1").metrics
        hospital = pipeline.store.get("2").metrics
        school = pipeline.store.get("3").metrics

        assert hq.epi == 235.2
        assert hq.compliance_rating == ComplianceRating.COMPLIANT
        assert hospital.epi == 333.6
        assert hospital.compliance_rating == ComplianceRating.NOT_COMPLIANT
        assert school.epi == 235.9
        assert school.compliance_rating == ComplianceRating.NOT_COMPLIANT

    def test_seed_custom_audits(self, hq_audit) -> None:
        pipeline = IngestionPipeline()
        assert pipeline.seed([hq_audit, AuditInput()]) == 1
