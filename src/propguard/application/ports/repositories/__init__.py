"""Repository ports."""

from propguard.application.ports.repositories.permission_override_repository import (
    PermissionOverrideRepository,
)
from propguard.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from propguard.application.ports.repositories.property_assignment_repository import (
    PropertyAssignmentRepository,
)
from propguard.application.ports.repositories.role_assignment_repository import (
    RoleAssignmentRepository,
)
from propguard.application.ports.repositories.role_repository import RoleRepository
from propguard.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "PermissionOverrideRepository",
    "PermissionRepository",
    "PropertyAssignmentRepository",
    "RoleAssignmentRepository",
    "RoleRepository",
    "UserRepository",
]
