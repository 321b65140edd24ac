"""PostgreSQL role assignment repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from propguard.domain.entities import RoleAssignment


class PostgresRoleAssignmentRepository:
    """Role assignment repository (table user_role)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_user(self, user_id: UUID) -> list[RoleAssignment]:
        """List assignments for user in insertion order."""
        cur = await self._conn.execute(
            "SELECT user_id, role_id, property_id, assigned_by, assigned_at "
            "FROM user_role WHERE user_id = %s ORDER BY seq",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            RoleAssignment(
                user_id=r[0],
                role_id=r[1],
                property_id=r[2],
                assigned_by=r[3],
                assigned_at=r[4],
            )
            for r in rows
        ]

    async def delete_by_user(self, user_id: UUID, property_id: UUID | None = None) -> None:
        """Delete all assignments for user, or only those in property scope."""
        if property_id is None:
            await self._conn.execute(
                "DELETE FROM user_role WHERE user_id = %s", (user_id,)
            )
        else:
            await self._conn.execute(
                "DELETE FROM user_role WHERE user_id = %s AND property_id = %s",
                (user_id, property_id),
            )

    async def upsert_batch(self, assignments: list[RoleAssignment]) -> None:
        """Insert assignments, refreshing assigned_by/assigned_at on conflict."""
        if not assignments:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO user_role (user_id, role_id, property_id, assigned_by, assigned_at) "
                "VALUES (%s, %s, %s, %s, %s) "
                "ON CONFLICT (user_id, role_id, property_id) DO UPDATE SET "
                "assigned_by = EXCLUDED.assigned_by, assigned_at = EXCLUDED.assigned_at",
                [
                    (a.user_id, a.role_id, a.property_id, a.assigned_by, a.assigned_at)
                    for a in assignments
                ],
            )

    async def exists_for_role(self, role_id: UUID) -> bool:
        """Check whether any user holds role."""
        cur = await self._conn.execute(
            "SELECT 1 FROM user_role WHERE role_id = %s LIMIT 1", (role_id,)
        )
        return await cur.fetchone() is not None
