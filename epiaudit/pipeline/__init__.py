"""Ingestion pipeline and record store."""

from epiaudit.pipeline.ingestion import IngestionPipeline, IngestionResult
from epiaudit.pipeline.store import AuditStore

__all__ = ["AuditStore", "IngestionPipeline", "IngestionResult"]
