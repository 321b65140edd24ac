"""Permission catalog repository port."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from propguard.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for the read-only permission catalog."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def list_all(self) -> list[Permission]:
        """All permissions ordered by resource, action."""
        ...

    async def list_by_ids(self, permission_ids: Iterable[UUID]) -> list[Permission]:
        """Permissions for the given ids; unknown ids are omitted."""
        ...
