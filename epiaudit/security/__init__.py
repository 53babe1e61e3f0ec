"""Permission oracle for the application layer."""

from epiaudit.security.permissions import PermissionManager, Role, User

__all__ = ["PermissionManager", "Role", "User"]
