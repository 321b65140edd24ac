"""User repository port."""

from typing import Protocol
from uuid import UUID

from propguard.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_for_update(self, user_id: UUID) -> User | None:
        """Get user and lock the row until the unit of work ends."""
        ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...
