"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from propguard.domain.entities import User
from propguard.domain.value_objects import UserStatus

_COLUMNS = (
    "id, email, full_name, status, created_at, updated_at, approved_at, approved_by"
)


def _row_to_user(r: tuple) -> User:
    return User(
        id=r[0],
        email=r[1],
        full_name=r[2],
        status=UserStatus(r[3]),
        created_at=r[4],
        updated_at=r[5],
        approved_at=r[6],
        approved_by=r[7],
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s", (user_id,)
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_for_update(self, user_id: UUID) -> User | None:
        """Get user and hold a row lock until commit or rollback."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s FOR UPDATE", (user_id,)
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def create(self, user: User) -> User:
        """Create user."""
        await self._conn.execute(
            f"INSERT INTO app_user ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.email,
                user.full_name,
                str(user.status),
                user.created_at,
                user.updated_at,
                user.approved_at,
                user.approved_by,
            ),
        )
        return user

    async def update(self, user: User) -> None:
        """Update status and approval fields."""
        await self._conn.execute(
            "UPDATE app_user SET email=%s, full_name=%s, status=%s, updated_at=%s, "
            "approved_at=%s, approved_by=%s WHERE id=%s",
            (
                user.email,
                user.full_name,
                str(user.status),
                user.updated_at,
                user.approved_at,
                user.approved_by,
                user.id,
            ),
        )
