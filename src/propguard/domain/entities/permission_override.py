"""Permission override - direct per-user grant or deny."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from propguard.domain.value_objects import OverrideKind


@dataclass(frozen=True)
class PermissionOverride:
    """Direct grant or deny of a single permission, optionally scoped and time-limited."""

    user_id: UUID
    permission_id: UUID
    override_kind: OverrideKind
    granted_by: UUID | None
    granted_at: datetime
    property_id: UUID | None = None
    expires_at: datetime | None = None
    reason: str | None = None

    @property
    def unique_key(self) -> tuple[UUID, UUID, UUID | None]:
        return (self.user_id, self.permission_id, self.property_id)

    def is_active(self, now: datetime) -> bool:
        """Expired overrides stay stored but no longer take part in resolution."""
        return self.expires_at is None or self.expires_at > now
