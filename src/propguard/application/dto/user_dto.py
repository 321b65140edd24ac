"""User DTOs - typed requests and the user view returned by every user operation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from propguard.domain.entities import (
    PermissionOverride,
    PropertyAssignment,
    Role,
    RoleAssignment,
    User,
)
from propguard.domain.value_objects import OverrideKind


@dataclass
class ApproveUserInput:
    """Input for approving a pending user."""

    user_id: UUID
    default_role_name: str | None = None
    property_ids: list[UUID] = field(default_factory=list)


@dataclass
class AssignRolesInput:
    """Input for assigning roles. property_id None means global scope."""

    user_id: UUID
    role_ids: list[UUID]
    property_id: UUID | None = None
    replace_existing: bool = False


@dataclass
class PermissionOverrideItem:
    """One direct override in an assign-permissions batch."""

    permission_id: UUID
    override_kind: OverrideKind
    property_id: UUID | None = None
    expires_at: datetime | None = None
    reason: str | None = None


@dataclass
class AssignPermissionsInput:
    """Input for assigning direct permission overrides."""

    user_id: UUID
    overrides: list[PermissionOverrideItem]
    replace_existing: bool = False


@dataclass
class AssignPropertiesInput:
    """Input for assigning properties. First id becomes primary on replace."""

    user_id: UUID
    property_ids: list[UUID]
    replace_existing: bool = False


@dataclass
class UserView:
    """User with roles, direct overrides, effective permissions and properties."""

    user: User
    roles: list[Role]
    role_assignments: list[RoleAssignment]
    direct_overrides: list[PermissionOverride]
    effective_permissions: list[str]
    properties: list[PropertyAssignment]

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        u = self.user
        return {
            "id": str(u.id),
            "email": u.email,
            "full_name": u.full_name,
            "status": str(u.status),
            "approved_at": u.approved_at.isoformat() if u.approved_at else None,
            "approved_by": str(u.approved_by) if u.approved_by else None,
            "roles": [
                {"id": str(r.id), "name": r.name, "priority": r.priority}
                for r in self.roles
            ],
            "role_assignments": [
                {
                    "role_id": str(a.role_id),
                    "property_id": str(a.property_id) if a.property_id else None,
                }
                for a in self.role_assignments
            ],
            "direct_permissions": [
                {
                    "permission_id": str(o.permission_id),
                    "override_kind": str(o.override_kind),
                    "property_id": str(o.property_id) if o.property_id else None,
                    "expires_at": o.expires_at.isoformat() if o.expires_at else None,
                    "reason": o.reason,
                }
                for o in self.direct_overrides
            ],
            "effective_permissions": list(self.effective_permissions),
            "properties": [
                {"property_id": str(p.property_id), "is_primary": p.is_primary}
                for p in self.properties
            ],
        }
