"""Exceptions raised by the application layer.

The engine itself returns structured results and does not raise these.
"""


class EpiAuditError(Exception):
    """Base class for epiaudit errors."""


class AuditPermissionError(EpiAuditError):
    """Raised when a user lacks permission for an action."""


class AuditNotFoundError(EpiAuditError):
    """Raised when an audit id is not in the store."""
