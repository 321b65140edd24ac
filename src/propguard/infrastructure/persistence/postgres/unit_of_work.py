"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from propguard.domain.exceptions import DependencyFailure
from propguard.infrastructure.persistence.postgres.permission_override_repository import (
    PostgresPermissionOverrideRepository,
)
from propguard.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from propguard.infrastructure.persistence.postgres.property_assignment_repository import (
    PostgresPropertyAssignmentRepository,
)
from propguard.infrastructure.persistence.postgres.role_assignment_repository import (
    PostgresRoleAssignmentRepository,
)
from propguard.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from propguard.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._users = PostgresUserRepository(self._conn)
        self._permissions = PostgresPermissionRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._role_assignments = PostgresRoleAssignmentRepository(self._conn)
        self._permission_overrides = PostgresPermissionOverrideRepository(self._conn)
        self._property_assignments = PostgresPropertyAssignmentRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def role_assignments(self) -> PostgresRoleAssignmentRepository:
        return self._role_assignments

    @property
    def permission_overrides(self) -> PostgresPermissionOverrideRepository:
        return self._permission_overrides

    @property
    def property_assignments(self) -> PostgresPropertyAssignmentRepository:
        return self._property_assignments

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Database errors surface as DependencyFailure after rollback.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except psycopg.Error as e:
                await uow.rollback()
                raise DependencyFailure(f"Record store error: {e}") from e
            except BaseException:
                await uow.rollback()
                raise

    return factory
