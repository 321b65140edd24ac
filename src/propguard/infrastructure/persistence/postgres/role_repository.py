"""PostgreSQL role repository implementation."""

from collections.abc import Iterable
from uuid import UUID

from psycopg import AsyncConnection

from propguard.domain.entities import Role

_COLUMNS = "id, name, display_name, description, priority, is_system_role"


class PostgresRoleRepository:
    """Role repository implementation. Loads each role's permission bundle."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _with_permissions(self, rows: list[tuple]) -> list[Role]:
        if not rows:
            return []
        cur = await self._conn.execute(
            "SELECT role_id, permission_id FROM role_permission WHERE role_id = ANY(%s)",
            ([r[0] for r in rows],),
        )
        bundles: dict[UUID, list[UUID]] = {}
        for role_id, permission_id in await cur.fetchall():
            bundles.setdefault(role_id, []).append(permission_id)
        return [
            Role(
                id=r[0],
                name=r[1],
                display_name=r[2],
                description=r[3],
                priority=r[4],
                is_system_role=r[5],
                permission_ids=bundles.get(r[0], []),
            )
            for r in rows
        ]

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s", (role_id,)
        )
        roles = await self._with_permissions(await cur.fetchall())
        return roles[0] if roles else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE name = %s", (name,)
        )
        roles = await self._with_permissions(await cur.fetchall())
        return roles[0] if roles else None

    async def list_all(self) -> list[Role]:
        """List all roles, highest priority first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role ORDER BY priority DESC, name"
        )
        return await self._with_permissions(await cur.fetchall())

    async def list_by_ids(self, role_ids: Iterable[UUID]) -> list[Role]:
        """List roles by ids."""
        ids = list(role_ids)
        if not ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = ANY(%s)", (ids,)
        )
        return await self._with_permissions(await cur.fetchall())

    async def create(self, role: Role) -> Role:
        """Create role row. Permissions are written by set_permissions."""
        await self._conn.execute(
            f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.name,
                role.display_name,
                role.description,
                role.priority,
                role.is_system_role,
            ),
        )
        return role

    async def update(self, role: Role) -> None:
        """Update role fields."""
        await self._conn.execute(
            "UPDATE role SET display_name=%s, description=%s, priority=%s, "
            "updated_at=now() WHERE id=%s",
            (role.display_name, role.description, role.priority, role.id),
        )

    async def delete(self, role_id: UUID) -> None:
        """Delete role and its permission bundle."""
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    async def set_permissions(self, role_id: UUID, permission_ids: list[UUID]) -> None:
        """Replace role permission bundle."""
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s", (role_id,)
        )
        if not permission_ids:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s)",
                [(role_id, pid) for pid in permission_ids],
            )
