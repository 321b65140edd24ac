"""PostgreSQL permission catalog repository implementation."""

from collections.abc import Iterable
from uuid import UUID

from psycopg import AsyncConnection

from propguard.domain.entities import Permission


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            "SELECT id, resource, action, description FROM permission WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Permission(id=r[0], resource=r[1], action=r[2], description=r[3])

    async def list_all(self) -> list[Permission]:
        """List all permissions ordered by resource, action."""
        cur = await self._conn.execute(
            "SELECT id, resource, action, description FROM permission "
            "ORDER BY resource, action"
        )
        rows = await cur.fetchall()
        return [
            Permission(id=r[0], resource=r[1], action=r[2], description=r[3])
            for r in rows
        ]

    async def list_by_ids(self, permission_ids: Iterable[UUID]) -> list[Permission]:
        """List permissions by ids."""
        ids = list(permission_ids)
        if not ids:
            return []
        cur = await self._conn.execute(
            "SELECT id, resource, action, description FROM permission WHERE id = ANY(%s)",
            (ids,),
        )
        rows = await cur.fetchall()
        return [
            Permission(id=r[0], resource=r[1], action=r[2], description=r[3])
            for r in rows
        ]
