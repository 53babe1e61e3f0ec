"""In-memory, insertion-ordered collection of committed audit records.

The store owns its records.  Writes and reads both go through deep copies,
so a committed record only changes when it is ingested again.

No locking: callers serialize writes to the same id.
"""

from __future__ import annotations

import logging
from typing import Iterator

from epiaudit.models.audit import AuditRecord

logger = logging.getLogger(__name__)


class AuditStore:
    """Ordered record collection keyed by audit id."""

    def __init__(self, records: list[AuditRecord] | None = None) -> None:
        self._records: list[AuditRecord] = []
        for record in records or []:
            self.upsert(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AuditRecord]:
        return iter(self.list())

    def __contains__(self, audit_id: object) -> bool:
        return self._index(audit_id) is not None

    def _index(self, audit_id: object) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == audit_id:
                return i
        return None

    def get(self, audit_id: str) -> AuditRecord | None:
        """Copy of the committed record, or None."""
        idx = self._index(audit_id)
        if idx is None:
            return None
        return self._records[idx].model_copy(deep=True)

    def list(self) -> list[AuditRecord]:
        """Copies of all records in commit order."""
        return [r.model_copy(deep=True) for r in self._records]

    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def upsert(self, record: AuditRecord) -> bool:
        """Store a copy of *record*, replacing the one with the same id.

        Returns True if an existing record was replaced.
        """
        owned = record.model_copy(deep=True)
        idx = self._index(owned.id)
        if idx is None:
            self._records.append(owned)
            logger.debug("Appended audit %s", owned.id)
            return False
        self._records[idx] = owned
        logger.debug("Replaced audit %s", owned.id)
        return True
