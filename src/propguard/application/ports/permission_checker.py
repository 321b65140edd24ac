"""Permission checker port - RBAC authorization."""

from typing import Protocol
from uuid import UUID


class PermissionChecker(Protocol):
    """Port for checking whether a user holds a permission key."""

    async def check(self, user_id: UUID, permission: str) -> bool: ...
