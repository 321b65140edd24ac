"""Domain entities."""

from propguard.domain.entities.permission import Permission
from propguard.domain.entities.permission_override import PermissionOverride
from propguard.domain.entities.property_assignment import PropertyAssignment
from propguard.domain.entities.role import DEFAULT_ROLE_PRIORITY, Role
from propguard.domain.entities.role_assignment import RoleAssignment
from propguard.domain.entities.user import User

__all__ = [
    "DEFAULT_ROLE_PRIORITY",
    "Permission",
    "PermissionOverride",
    "PropertyAssignment",
    "Role",
    "RoleAssignment",
    "User",
]
