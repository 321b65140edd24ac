"""PostgreSQL permission override repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from propguard.domain.entities import PermissionOverride
from propguard.domain.value_objects import OverrideKind

_SELECT = (
    "SELECT user_id, permission_id, override_type, property_id, expires_at, "
    "reason, granted_by, granted_at FROM user_permission"
)


def _row_to_override(r: tuple) -> PermissionOverride:
    return PermissionOverride(
        user_id=r[0],
        permission_id=r[1],
        override_kind=OverrideKind(r[2]),
        property_id=r[3],
        expires_at=r[4],
        reason=r[5],
        granted_by=r[6],
        granted_at=r[7],
    )


class PostgresPermissionOverrideRepository:
    """Permission override repository (table user_permission)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_user(self, user_id: UUID) -> list[PermissionOverride]:
        """List all overrides for user in write order, expired included."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE user_id = %s ORDER BY seq", (user_id,)
        )
        return [_row_to_override(r) for r in await cur.fetchall()]

    async def list_active_by_user(
        self, user_id: UUID, now: datetime
    ) -> list[PermissionOverride]:
        """List non-expired overrides in application order."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE user_id = %s AND (expires_at IS NULL OR expires_at > %s) "
            "ORDER BY granted_at, seq",
            (user_id, now),
        )
        return [_row_to_override(r) for r in await cur.fetchall()]

    async def delete_by_user(self, user_id: UUID) -> None:
        """Delete all overrides for user."""
        await self._conn.execute(
            "DELETE FROM user_permission WHERE user_id = %s", (user_id,)
        )

    async def upsert_batch(self, overrides: list[PermissionOverride]) -> None:
        """Insert overrides, replacing kind/expiry/reason on conflict.

        A rewritten row takes a fresh seq so it sorts after rows written before it.
        """
        if not overrides:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO user_permission (user_id, permission_id, override_type, "
                "property_id, expires_at, reason, granted_by, granted_at) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s) "
                "ON CONFLICT (user_id, permission_id, property_id) DO UPDATE SET "
                "override_type = EXCLUDED.override_type, expires_at = EXCLUDED.expires_at, "
                "reason = EXCLUDED.reason, granted_by = EXCLUDED.granted_by, "
                "granted_at = EXCLUDED.granted_at, seq = DEFAULT",
                [
                    (
                        o.user_id,
                        o.permission_id,
                        str(o.override_kind),
                        o.property_id,
                        o.expires_at,
                        o.reason,
                        o.granted_by,
                        o.granted_at,
                    )
                    for o in overrides
                ],
            )
