"""Role repository port."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from propguard.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence. Roles carry their permission_ids."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]:
        """All roles ordered by priority descending."""
        ...

    async def list_by_ids(self, role_ids: Iterable[UUID]) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...

    async def set_permissions(self, role_id: UUID, permission_ids: list[UUID]) -> None:
        """Replace the permission bundle of a role."""
        ...
