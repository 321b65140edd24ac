"""Permission override repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from propguard.domain.entities import PermissionOverride


class PermissionOverrideRepository(Protocol):
    """Port for direct overrides, unique on (user_id, permission_id, property_id)."""

    async def list_by_user(self, user_id: UUID) -> list[PermissionOverride]:
        """All overrides, expired included, in application order."""
        ...

    async def list_active_by_user(
        self, user_id: UUID, now: datetime
    ) -> list[PermissionOverride]:
        """Overrides with no expiry or expiry after now, in application order."""
        ...

    async def delete_by_user(self, user_id: UUID) -> None: ...

    async def upsert_batch(self, overrides: list[PermissionOverride]) -> None:
        """Insert or replace kind/expiry/reason on the composite key."""
        ...
