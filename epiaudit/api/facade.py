"""AuditWorkspace — the application layer around the engine.

Usage::

    from epiaudit import AuditWorkspace

    ws = AuditWorkspace(seed=True)
    result = ws.save(audit, user=auditor)
    ws.publish(audit.id, user=manager)
    ws.assess(audit.id)
    ws.portfolio(PortfolioFilter(year=2023))

Permissions are checked here, never inside the pipeline.
"""

from __future__ import annotations

import logging
from pathlib import Path

from epiaudit.analytics.financials import AuditFinancials, payback_period
from epiaudit.analytics.portfolio import PortfolioFilter, PortfolioStats
from epiaudit.compliance.engine import ComplianceAssessment, ComplianceEngine
from epiaudit.compliance.report import TechnicalReport
from epiaudit.errors import AuditNotFoundError
from epiaudit.models.audit import AuditInput, AuditRecord, EfficiencyMeasure
from epiaudit.models.enums import AuditStatus
from epiaudit.pipeline.ingestion import IngestionPipeline, IngestionResult
from epiaudit.security.permissions import PermissionManager, User
from epiaudit.settings import ConfigManager

logger = logging.getLogger(__name__)


class AuditWorkspace:
    """Single entry point for saving, publishing and reporting on audits.

    Parameters
    ----------
    pipeline:
        Ingestion pipeline.  A fresh one with an empty store if *None*.
    permissions:
        Permission oracle.  Defaults to the standard role matrix.
    seed:
        Ingest the sample audits on construction.
    """

    def __init__(
        self,
        pipeline: IngestionPipeline | None = None,
        permissions: PermissionManager | None = None,
        *,
        seed: bool = False,
    ) -> None:
        self.pipeline = pipeline or IngestionPipeline()
        self.permissions = permissions or PermissionManager()
        self.compliance = ComplianceEngine()
        if seed:
            self.pipeline.seed()

    @classmethod
    def from_config(cls, project_path: str | Path = ".") -> AuditWorkspace:
        """Build a workspace from layered configuration."""
        manager = ConfigManager()
        settings = manager.load_settings(project_path)
        manager.configure_logging(settings)
        pipeline = IngestionPipeline(latency_seconds=settings.pipeline_latency)
        return cls(pipeline, seed=settings.seed_samples)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, audit_id: str) -> AuditRecord:
        record = self.pipeline.store.get(audit_id)
        if record is None:
            raise AuditNotFoundError(f"No audit with id '{audit_id}'.")
        return record

    def list_audits(self) -> list[AuditRecord]:
        return self.pipeline.store.list()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, audit: AuditInput | AuditRecord, user: User) -> IngestionResult:
        """Ingest *audit* on behalf of *user*.

        Editing requires ``edit``; saving an audit whose status is Published
        also requires ``publish``.
        """
        candidate = audit.audit if isinstance(audit, AuditRecord) else audit
        self.permissions.require_permission(user, "edit")
        if candidate.status == AuditStatus.PUBLISHED:
            self.permissions.require_permission(user, "publish")
        return self.pipeline.ingest(candidate)

    def publish(self, audit_id: str, user: User) -> IngestionResult:
        """Move a committed audit to Published."""
        self.permissions.require_permission(user, "publish")
        record = self.get(audit_id)
        audit = record.audit.model_copy(update={"status": AuditStatus.PUBLISHED})
        result = self.pipeline.ingest(audit)
        if result.success:
            logger.info("Audit %s published by %s", audit_id, user.id)
        return result

    def add_measure(
        self,
        audit_id: str,
        measure: EfficiencyMeasure,
        user: User,
    ) -> IngestionResult:
        """Append an efficiency measure and re-ingest the audit.

        A missing payback period is filled from cost and savings.
        """
        record = self.get(audit_id)
        if not measure.payback_period:
            measure = measure.model_copy(update={
                "payback_period": payback_period(
                    measure.estimated_cost, measure.estimated_savings,
                ),
            })
        audit = record.audit.model_copy(
            update={"measures": [*record.audit.measures, measure]},
        )
        return self.save(audit, user)

    # ------------------------------------------------------------------
    # Compliance and analytics
    # ------------------------------------------------------------------

    def check_technical(self, audit: AuditInput) -> TechnicalReport:
        """Live technical checks on an unsaved, possibly partial audit."""
        return self.compliance.check_technical(audit)

    def assess(self, audit_id: str) -> ComplianceAssessment:
        return self.compliance.assess(self.get(audit_id))

    def financials(self, audit_id: str) -> AuditFinancials:
        return AuditFinancials.from_audit(self.get(audit_id))

    def portfolio(self, portfolio_filter: PortfolioFilter | None = None) -> PortfolioStats:
        return PortfolioStats.for_filter(self.list_audits(), portfolio_filter)
