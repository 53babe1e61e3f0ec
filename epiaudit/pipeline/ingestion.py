"""IngestionPipeline — validate, calculate and commit an audit in one pass.

Usage::

    from epiaudit.pipeline import IngestionPipeline

    pipeline = IngestionPipeline()
    result = pipeline.ingest(audit)
    if result.success:
        record = result.record

Either every stage completes and the full record joins the store, or nothing
is written.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable

from pydantic import BaseModel, Field

from epiaudit.metrics.calculator import MetricsCalculator
from epiaudit.models.audit import AuditInput, AuditRecord
from epiaudit.pipeline.store import AuditStore
from epiaudit.validation.validator import InputValidator

logger = logging.getLogger(__name__)


class IngestionResult(BaseModel):
    """Outcome of one ingestion call.

    ``record`` is a copy of what was committed; editing it does not touch the
    store.
    """

    success: bool
    record: AuditRecord | None = None
    errors: dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        if self.success and self.record is not None:
            return {"success": True, "record": self.record.model_dump(mode="json")}
        return {"success": False, "errors": dict(self.errors)}


class IngestionPipeline:
    """Input validation, metric calculation and commit as a single unit of work.

    Parameters
    ----------
    store:
        Destination store.  A fresh empty store if *None*.
    validator:
        Input validator.  Defaults to :class:`InputValidator`.
    calculator:
        Metrics calculator.  Defaults to :class:`MetricsCalculator`.
    latency_seconds:
        Simulated I/O delay applied before each ingestion.
    """

    def __init__(
        self,
        store: AuditStore | None = None,
        validator: InputValidator | None = None,
        calculator: MetricsCalculator | None = None,
        latency_seconds: float = 0.0,
    ) -> None:
        self.store = store if store is not None else AuditStore()
        self.validator = validator or InputValidator()
        self.calculator = calculator or MetricsCalculator()
        self.latency_seconds = latency_seconds

    def process(self, audit: AuditInput) -> AuditRecord:
        """Compute a record with fresh metrics without committing it."""
        audit = audit.model_copy(deep=True)
        return AuditRecord(audit=audit, metrics=self.calculator.calculate(audit))

    def ingest(self, candidate: AuditInput | AuditRecord) -> IngestionResult:
        """Validate, recompute and commit *candidate*.

        Metrics already present on an ``AuditRecord`` candidate are ignored
        and recomputed from its input.
        """
        if self.latency_seconds > 0:
            time.sleep(self.latency_seconds)

        audit = candidate.audit if isinstance(candidate, AuditRecord) else candidate

        validation = self.validator.validate(audit)
        if not validation.is_valid:
            logger.warning(
                "Rejected audit %s: %s",
                audit.id, ", ".join(sorted(validation.errors)),
            )
            return IngestionResult(success=False, errors=validation.errors)

        record = self.process(audit)
        replaced = self.store.upsert(record)
        logger.info(
            "%s audit %s (EPI %s, %s)",
            "Updated" if replaced else "Committed",
            record.id, record.metrics.epi, record.metrics.compliance_rating.value,
        )
        return IngestionResult(success=True, record=record)

    def seed(self, audits: Iterable[AuditInput] | None = None) -> int:
        """Ingest sample audits.  Returns how many were committed."""
        if audits is None:
            from epiaudit.seed_data import SEED_AUDITS
            audits = SEED_AUDITS

        committed = sum(1 for a in audits if self.ingest(a).success)
        logger.info("Seeded %d audits.", committed)
        return committed
