"""Tests for the AuditWorkspace facade and role permissions."""

from __future__ import annotations

import pytest

from epiaudit import AuditWorkspace
from epiaudit.analytics import PortfolioFilter
from epiaudit.errors import AuditNotFoundError, AuditPermissionError, EpiAuditError
from epiaudit.models import (
    AuditInput,
    AuditStatus,
    BuildingType,
    ComplianceDetail,
    ComplianceGoal,
    ComplianceRating,
    EfficiencyMeasure,
    TechnicalParameters,
)
from epiaudit.security import PermissionManager, Role, User


@pytest.fixture
def auditor() -> User:
    return User(id="u1", name="Sarah Jenkins", role=Role.AUDITOR)


@pytest.fixture
def manager() -> User:
    return User(id="u2", name="Mike Ross", role=Role.MANAGER)


@pytest.fixture
def admin() -> User:
    return User(id="u3", name="Alex Admin", role=Role.ADMINISTRATOR)


@pytest.fixture
def workspace() -> AuditWorkspace:
    return AuditWorkspace(seed=True)


# ── PermissionManager ───────────────────────────────────────────────────────


class TestPermissionManager:
    @pytest.mark.parametrize("role, action, allowed", [
        (Role.AUDITOR, "edit", True),
        (Role.AUDITOR, "publish", False),
        (Role.AUDITOR, "delete", False),
        (Role.AUDITOR, "view_all", False),
        (Role.MANAGER, "edit", False),
        (Role.MANAGER, "publish", True),
        (Role.MANAGER, "view_all", True),
        (Role.ADMINISTRATOR, "edit", True),
        (Role.ADMINISTRATOR, "publish", True),
        (Role.ADMINISTRATOR, "delete", True),
    ])
    def test_matrix(self, role, action, allowed) -> None:
        user = User(id="x", role=role)
        assert PermissionManager().check_permission(user, action) is allowed

    def test_unknown_action_denied(self, admin) -> None:
        assert not PermissionManager().check_permission(admin, "launch")

    def test_require_permission_raises(self, auditor) -> None:
        with pytest.raises(AuditPermissionError, match="publish"):
            PermissionManager().require_permission(auditor, "publish")

    def test_custom_matrix(self, auditor) -> None:
        manager = PermissionManager({"publish": {Role.AUDITOR}})
        assert manager.check_permission(auditor, "publish")
        assert manager.allowed_roles("edit") == set()

    def test_permission_error_is_epiaudit_error(self) -> None:
        assert issubclass(AuditPermissionError, EpiAuditError)

    def test_initials(self, auditor) -> None:
        assert auditor.initials == "SJ"


# ── AuditWorkspace ──────────────────────────────────────────────────────────


class TestWorkspaceReads:
    def test_seeded(self, workspace) -> None:
        assert [r.id for r in workspace.list_audits()] == ["1", "2", "3"]
        assert workspace.get("1").audit.name

    def test_empty_by_default(self) -> None:
        assert AuditWorkspace().list_audits() == []

    def test_missing_audit(self, workspace) -> None:
        with pytest.raises(AuditNotFoundError):
            workspace.get("nope")


class TestWorkspaceWrites:
    def test_auditor_saves_draft(self, workspace, auditor) -> None:
        audit = AuditInput(name="Annex", gross_floor_area=20000)
        result = workspace.save(audit, auditor)
        assert result.success
        assert workspace.get(audit.id).audit.name == "Annex"

    def test_manager_cannot_edit(self, workspace, manager) -> None:
        with pytest.raises(AuditPermissionError):
            workspace.save(AuditInput(name="Annex", gross_floor_area=1), manager)
        assert len(workspace.list_audits()) == 3

    def test_auditor_cannot_save_published(self, workspace, auditor) -> None:
        record = workspace.get("1")
        assert record.audit.status == AuditStatus.PUBLISHED
        with pytest.raises(AuditPermissionError):
            workspace.save(record, auditor)

    def test_admin_can_save_published(self, workspace, admin) -> None:
        assert workspace.save(workspace.get("1"), admin).success

    def test_validation_errors_returned(self, workspace, auditor) -> None:
        result = workspace.save(AuditInput(name="x", gross_floor_area=0), auditor)
        assert not result.success
        assert "gross_floor_area" in result.errors

    def test_publish(self, workspace, manager) -> None:
        result = workspace.publish("2", manager)
        assert result.success
        assert workspace.get("2").audit.status == AuditStatus.PUBLISHED
        assert workspace.get("2").metrics.epi == 333.6

    def test_auditor_cannot_publish(self, workspace, auditor) -> None:
        with pytest.raises(AuditPermissionError):
            workspace.publish("2", auditor)
        assert workspace.get("2").audit.status == AuditStatus.DRAFT

    def test_publish_unknown(self, workspace, manager) -> None:
        with pytest.raises(AuditNotFoundError):
            workspace.publish("missing", manager)

    def test_add_measure_fills_payback(self, workspace, auditor) -> None:
        measure = EfficiencyMeasure(
            id="eem-new", title="Occupancy sensors",
            estimated_cost=30000, estimated_savings=12000,
        )
        result = workspace.add_measure("3", measure, auditor)
        assert result.success
        added = workspace.get("3").audit.measures[-1]
        assert added.id == "eem-new"
        assert added.payback_period == 2.5

    def test_add_measure_keeps_given_payback(self, workspace, auditor) -> None:
        measure = EfficiencyMeasure(
            estimated_cost=100, estimated_savings=10, payback_period=4.0,
        )
        workspace.add_measure("3", measure, auditor)
        assert workspace.get("3").audit.measures[-1].payback_period == 4.0


class TestWorkspaceReports:
    def test_check_technical_on_unsaved_audit(self, workspace) -> None:
        audit = AuditInput(compliance=ComplianceDetail(
            goal=ComplianceGoal.PLUS,
            technical=TechnicalParameters(window_area=2000, wall_area=8000),
        ))
        report = workspace.check_technical(audit)
        assert report.window_wall_ratio == pytest.approx(20.0)

    def test_assess(self, workspace) -> None:
        assessment = workspace.assess("1")
        assert assessment.rating == ComplianceRating.COMPLIANT
        assert assessment.goal == ComplianceGoal.PLUS

    def test_financials(self, workspace) -> None:
        financials = workspace.financials("1")
        assert financials.potential_savings == 654500
        assert financials.total_investment == 1292000

    def test_portfolio(self, workspace) -> None:
        assert workspace.portfolio().count == 3
        hospitals = workspace.portfolio(PortfolioFilter(building_type=BuildingType.HOSPITAL))
        assert hospitals.count == 1


class TestFromConfig:
    def test_seeds_from_config(self, tmp_path, monkeypatch) -> None:
        for key in ("EPIAUDIT_ENV", "EPIAUDIT_SEED_SAMPLES", "EPIAUDIT_PIPELINE_LATENCY",
                    "EPIAUDIT_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        (tmp_path / ".env").write_text(
            "EPIAUDIT_ENV=testing\nEPIAUDIT_SEED_SAMPLES=true\n", encoding="utf-8",
        )
        workspace = AuditWorkspace.from_config(tmp_path)
        assert len(workspace.list_audits()) == 3
        assert workspace.pipeline.latency_seconds == 0.0

    def test_testing_profile_starts_empty(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("EPIAUDIT_ENV", "testing")
        monkeypatch.delenv("EPIAUDIT_SEED_SAMPLES", raising=False)
        assert AuditWorkspace.from_config(tmp_path).list_audits() == []
