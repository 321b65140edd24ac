"""Permission entity - catalog entry."""

from dataclasses import dataclass
from uuid import UUID

from propguard.domain.value_objects import PermissionKey


@dataclass(frozen=True)
class Permission:
    """Permission - atomic capability identified by (resource, action)."""

    id: UUID
    resource: str
    action: str
    description: str | None = None

    @property
    def key(self) -> str:
        return str(PermissionKey(self.resource, self.action))
