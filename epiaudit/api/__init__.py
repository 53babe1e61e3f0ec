"""Application-layer API."""

from epiaudit.api.facade import AuditWorkspace

__all__ = ["AuditWorkspace"]
