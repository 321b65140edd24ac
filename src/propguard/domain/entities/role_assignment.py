"""Role assignment - user holds role, optionally scoped to a property."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RoleAssignment:
    """Binding of a user to a role. property_id None means global scope."""

    user_id: UUID
    role_id: UUID
    assigned_by: UUID | None
    assigned_at: datetime
    property_id: UUID | None = None

    @property
    def unique_key(self) -> tuple[UUID, UUID, UUID | None]:
        return (self.user_id, self.role_id, self.property_id)
