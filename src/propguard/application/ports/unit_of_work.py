"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from propguard.application.ports.repositories import (
    PermissionOverrideRepository,
    PermissionRepository,
    PropertyAssignmentRepository,
    RoleAssignmentRepository,
    RoleRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def role_assignments(self) -> RoleAssignmentRepository: ...

    @property
    def permission_overrides(self) -> PermissionOverrideRepository: ...

    @property
    def property_assignments(self) -> PropertyAssignmentRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
