"""Permission checker implementation - backed by effective permission resolution."""

from collections.abc import Iterable
from datetime import UTC, datetime
from uuid import UUID

from propguard.application.user_views import load_effective_permissions
from propguard.domain.value_objects import UserStatus


class RBACPermissionChecker:
    """Checks user permissions against resolved role and override data.

    Users that are not active hold no permissions, whatever their assignments.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def effective_permissions(self, user_id: UUID) -> frozenset[str]:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user or user.status != UserStatus.ACTIVE:
                return frozenset()
            return await load_effective_permissions(uow, user_id, datetime.now(UTC))

    async def check(self, user_id: UUID, permission: str) -> bool:
        """Check if user holds permission."""
        return permission in await self.effective_permissions(user_id)

    async def has_all(self, user_id: UUID, permissions: Iterable[str]) -> bool:
        return set(permissions).issubset(await self.effective_permissions(user_id))

    async def has_any(self, user_id: UUID, permissions: Iterable[str]) -> bool:
        return not set(permissions).isdisjoint(await self.effective_permissions(user_id))


class AllowAllPermissionChecker:
    """Grants everything. Used when authorization is disabled for maintenance."""

    async def check(self, user_id: UUID, permission: str) -> bool:
        return True
