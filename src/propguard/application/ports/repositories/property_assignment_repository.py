"""Property assignment repository port."""

from typing import Protocol
from uuid import UUID

from propguard.domain.entities import PropertyAssignment


class PropertyAssignmentRepository(Protocol):
    """Port for user-property bindings, unique on (user_id, property_id)."""

    async def list_by_user(self, user_id: UUID) -> list[PropertyAssignment]: ...

    async def delete_by_user(self, user_id: UUID) -> None: ...

    async def upsert_batch(self, assignments: list[PropertyAssignment]) -> None: ...

    async def delete(self, user_id: UUID, property_id: UUID) -> bool:
        """Delete one assignment. Returns False if none existed."""
        ...
