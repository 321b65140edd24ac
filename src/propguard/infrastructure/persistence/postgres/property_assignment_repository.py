"""PostgreSQL property assignment repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from propguard.domain.entities import PropertyAssignment


class PostgresPropertyAssignmentRepository:
    """Property assignment repository (table user_property)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_user(self, user_id: UUID) -> list[PropertyAssignment]:
        """List property assignments for user."""
        cur = await self._conn.execute(
            "SELECT user_id, property_id, is_primary, assigned_by, assigned_at "
            "FROM user_property WHERE user_id = %s ORDER BY assigned_at, property_id",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            PropertyAssignment(
                user_id=r[0],
                property_id=r[1],
                is_primary=r[2],
                assigned_by=r[3],
                assigned_at=r[4],
            )
            for r in rows
        ]

    async def delete_by_user(self, user_id: UUID) -> None:
        """Delete all property assignments for user."""
        await self._conn.execute(
            "DELETE FROM user_property WHERE user_id = %s", (user_id,)
        )

    async def upsert_batch(self, assignments: list[PropertyAssignment]) -> None:
        """Insert assignments, updating primary flag on conflict."""
        if not assignments:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO user_property (user_id, property_id, is_primary, assigned_by, assigned_at) "
                "VALUES (%s, %s, %s, %s, %s) "
                "ON CONFLICT (user_id, property_id) DO UPDATE SET "
                "is_primary = EXCLUDED.is_primary, assigned_by = EXCLUDED.assigned_by",
                [
                    (a.user_id, a.property_id, a.is_primary, a.assigned_by, a.assigned_at)
                    for a in assignments
                ],
            )

    async def delete(self, user_id: UUID, property_id: UUID) -> bool:
        """Delete one property assignment."""
        cur = await self._conn.execute(
            "DELETE FROM user_property WHERE user_id = %s AND property_id = %s",
            (user_id, property_id),
        )
        return cur.rowcount > 0
