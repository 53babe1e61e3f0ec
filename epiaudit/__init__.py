"""epiaudit: energy metrics and compliance determination for building audits."""

__version__ = "1.0.0"

from epiaudit.analytics.financials import AuditFinancials
from epiaudit.analytics.portfolio import PortfolioFilter, PortfolioStats
from epiaudit.api.facade import AuditWorkspace
from epiaudit.compliance.classifier import classify
from epiaudit.compliance.engine import ComplianceAssessment, ComplianceEngine
from epiaudit.compliance.report import CheckResult, TechnicalReport
from epiaudit.compliance.technical import evaluate_technical
from epiaudit.errors import AuditNotFoundError, AuditPermissionError, EpiAuditError
from epiaudit.metrics.calculator import MetricsCalculator
from epiaudit.models.audit import AuditInput, AuditRecord, DerivedMetrics
from epiaudit.pipeline.ingestion import IngestionPipeline, IngestionResult
from epiaudit.pipeline.store import AuditStore
from epiaudit.security.permissions import PermissionManager, Role, User
from epiaudit.settings import ConfigManager, Settings
from epiaudit.validation.validator import InputValidator, ValidationResult

__all__ = [
    "__version__",
    # Facade
    "AuditWorkspace",
    # Engine
    "AuditInput",
    "AuditRecord",
    "AuditStore",
    "CheckResult",
    "ComplianceAssessment",
    "ComplianceEngine",
    "DerivedMetrics",
    "IngestionPipeline",
    "IngestionResult",
    "InputValidator",
    "MetricsCalculator",
    "TechnicalReport",
    "ValidationResult",
    "classify",
    "evaluate_technical",
    # Application layer
    "AuditFinancials",
    "AuditNotFoundError",
    "AuditPermissionError",
    "ConfigManager",
    "EpiAuditError",
    "PermissionManager",
    "PortfolioFilter",
    "PortfolioStats",
    "Role",
    "Settings",
    "User",
]
