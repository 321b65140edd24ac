"""Role catalog DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from propguard.domain.entities import DEFAULT_ROLE_PRIORITY


@dataclass
class CreateRoleInput:
    """Input for creating a custom role."""

    name: str
    display_name: str
    description: str | None = None
    priority: int = DEFAULT_ROLE_PRIORITY
    permission_ids: list[UUID] = field(default_factory=list)


@dataclass
class UpdateRoleInput:
    """Partial role update. None leaves a field unchanged."""

    role_id: UUID
    display_name: str | None = None
    description: str | None = None
    priority: int | None = None
    permission_ids: list[UUID] | None = None
