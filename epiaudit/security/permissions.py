"""Role-based permissions for audit editing and publishing.

The engine never consults this module; the application facade does before
calling into the pipeline.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from epiaudit.errors import AuditPermissionError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    AUDITOR = "Auditor"
    MANAGER = "Manager"
    ADMINISTRATOR = "Administrator"


class User(BaseModel):
    id: str
    name: str = ""
    role: Role = Role.AUDITOR

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part).upper()


# Permission matrix: action -> set of roles allowed
_PERMISSIONS: dict[str, set[Role]] = {
    "edit": {Role.AUDITOR, Role.ADMINISTRATOR},
    "publish": {Role.MANAGER, Role.ADMINISTRATOR},
    "delete": {Role.ADMINISTRATOR},
    "view_all": {Role.MANAGER, Role.ADMINISTRATOR},
}


class PermissionManager:
    """Answer whether a user may perform an action.

    Parameters
    ----------
    permissions:
        Override of the default action -> roles matrix.
    """

    def __init__(self, permissions: dict[str, set[Role]] | None = None) -> None:
        self._permissions = permissions if permissions is not None else dict(_PERMISSIONS)

    def allowed_roles(self, action: str) -> set[Role]:
        return set(self._permissions.get(action, set()))

    def check_permission(self, user: User, action: str) -> bool:
        """Return True if *user*'s role allows *action*.  Unknown actions are denied."""
        return user.role in self._permissions.get(action, set())

    def require_permission(self, user: User, action: str) -> None:
        """Raise AuditPermissionError if *user* lacks permission."""
        if not self.check_permission(user, action):
            logger.warning(
                "Denied '%s' to user %s (%s)", action, user.id, user.role.value,
            )
            raise AuditPermissionError(
                f"User '{user.id}' with role '{user.role.value}' "
                f"is not allowed to perform '{action}'."
            )
