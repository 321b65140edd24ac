"""Role assignment repository port."""

from typing import Protocol
from uuid import UUID

from propguard.domain.entities import RoleAssignment


class RoleAssignmentRepository(Protocol):
    """Port for user-role bindings, unique on (user_id, role_id, property_id)."""

    async def list_by_user(self, user_id: UUID) -> list[RoleAssignment]:
        """Assignments in insertion order."""
        ...

    async def delete_by_user(self, user_id: UUID, property_id: UUID | None = None) -> None:
        """Delete all assignments of user, or only those scoped to property_id."""
        ...

    async def upsert_batch(self, assignments: list[RoleAssignment]) -> None: ...

    async def exists_for_role(self, role_id: UUID) -> bool: ...
