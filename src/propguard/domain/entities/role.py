"""Role entity for RBAC."""

from dataclasses import dataclass, field
from uuid import UUID

DEFAULT_ROLE_PRIORITY = 100


@dataclass
class Role:
    """Role - named bundle of permissions with a priority hint."""

    id: UUID
    name: str
    display_name: str
    priority: int = DEFAULT_ROLE_PRIORITY
    description: str | None = None
    is_system_role: bool = False
    permission_ids: list[UUID] = field(default_factory=list)
