"""Pytest fixtures for PropGuard tests."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from propguard.domain.entities import (
    Permission,
    PermissionOverride,
    PropertyAssignment,
    Role,
    RoleAssignment,
    User,
)
from propguard.domain.value_objects import PermissionKey, UserStatus


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def get_for_update(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def create(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def update(self, user: User) -> None:
        self._by_id[user.id] = user


class FakePermissionRepository:
    """In-memory permission catalog."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Permission] = {}

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        return self._by_id.get(permission_id)

    async def list_all(self) -> list[Permission]:
        return sorted(self._by_id.values(), key=lambda p: (p.resource, p.action))

    async def list_by_ids(self, permission_ids: Iterable[UUID]) -> list[Permission]:
        return [self._by_id[i] for i in permission_ids if i in self._by_id]

    def add_permission(self, permission: Permission) -> None:
        """Helper to add permission for tests."""
        self._by_id[permission.id] = permission

    def remove_permission(self, permission_id: UUID) -> None:
        """Helper simulating a catalog entry deleted after assignment."""
        self._by_id.pop(permission_id, None)


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for role in self._by_id.values():
            if role.name == name:
                return role
        return None

    async def list_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.priority, reverse=True)

    async def list_by_ids(self, role_ids: Iterable[UUID]) -> list[Role]:
        return [self._by_id[i] for i in role_ids if i in self._by_id]

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        return role

    async def update(self, role: Role) -> None:
        existing = self._by_id[role.id]
        self._by_id[role.id] = replace(role, permission_ids=existing.permission_ids)

    async def delete(self, role_id: UUID) -> None:
        self._by_id.pop(role_id, None)

    async def set_permissions(self, role_id: UUID, permission_ids: list[UUID]) -> None:
        self._by_id[role_id] = replace(
            self._by_id[role_id], permission_ids=list(permission_ids)
        )

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakeRoleAssignmentRepository:
    """In-memory user-role bindings; upsert keeps the original position."""

    def __init__(self) -> None:
        self.rows: list[RoleAssignment] = []

    async def list_by_user(self, user_id: UUID) -> list[RoleAssignment]:
        return [a for a in self.rows if a.user_id == user_id]

    async def delete_by_user(self, user_id: UUID, property_id: UUID | None = None) -> None:
        self.rows = [
            a
            for a in self.rows
            if not (
                a.user_id == user_id
                and (property_id is None or a.property_id == property_id)
            )
        ]

    async def upsert_batch(self, assignments: list[RoleAssignment]) -> None:
        for new in assignments:
            for i, old in enumerate(self.rows):
                if old.unique_key == new.unique_key:
                    self.rows[i] = new
                    break
            else:
                self.rows.append(new)

    async def exists_for_role(self, role_id: UUID) -> bool:
        return any(a.role_id == role_id for a in self.rows)


class FakePermissionOverrideRepository:
    """In-memory overrides kept in write order; a rewritten row moves to the end."""

    def __init__(self) -> None:
        self.rows: list[PermissionOverride] = []

    async def list_by_user(self, user_id: UUID) -> list[PermissionOverride]:
        return [o for o in self.rows if o.user_id == user_id]

    async def list_active_by_user(
        self, user_id: UUID, now: datetime
    ) -> list[PermissionOverride]:
        return sorted(
            (o for o in await self.list_by_user(user_id) if o.is_active(now)),
            key=lambda o: o.granted_at,
        )

    async def delete_by_user(self, user_id: UUID) -> None:
        self.rows = [o for o in self.rows if o.user_id != user_id]

    async def upsert_batch(self, overrides: list[PermissionOverride]) -> None:
        for new in overrides:
            self.rows = [o for o in self.rows if o.unique_key != new.unique_key]
            self.rows.append(new)


class FakePropertyAssignmentRepository:
    """In-memory user-property bindings."""

    def __init__(self) -> None:
        self.rows: list[PropertyAssignment] = []

    async def list_by_user(self, user_id: UUID) -> list[PropertyAssignment]:
        return [p for p in self.rows if p.user_id == user_id]

    async def delete_by_user(self, user_id: UUID) -> None:
        self.rows = [p for p in self.rows if p.user_id != user_id]

    async def upsert_batch(self, assignments: list[PropertyAssignment]) -> None:
        for new in assignments:
            for i, old in enumerate(self.rows):
                if (old.user_id, old.property_id) == (new.user_id, new.property_id):
                    self.rows[i] = new
                    break
            else:
                self.rows.append(new)

    async def delete(self, user_id: UUID, property_id: UUID) -> bool:
        before = len(self.rows)
        self.rows = [
            p
            for p in self.rows
            if not (p.user_id == user_id and p.property_id == property_id)
        ]
        return len(self.rows) < before


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.permissions = FakePermissionRepository()
        self.roles = FakeRoleRepository()
        self.role_assignments = FakeRoleAssignmentRepository()
        self.permission_overrides = FakePermissionOverrideRepository()
        self.property_assignments = FakePropertyAssignmentRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass

    # --- seeding helpers ---

    def add_user(self, status: UserStatus = UserStatus.ACTIVE, user_id: UUID | None = None) -> User:
        now = datetime.now(UTC)
        uid = user_id or uuid4()
        user = User(
            id=uid,
            email=f"{uid.hex[:8]}@example.com",
            status=status,
            created_at=now,
            updated_at=now,
        )
        self.users._by_id[user.id] = user
        return user

    def add_permission(self, key: str) -> Permission:
        parsed = PermissionKey.parse(key)
        permission = Permission(id=uuid4(), resource=parsed.resource, action=parsed.action)
        self.permissions.add_permission(permission)
        return permission

    def add_role(
        self,
        name: str,
        keys: Iterable[str] = (),
        priority: int = 100,
        is_system_role: bool = False,
    ) -> Role:
        existing = {p.key: p for p in self.permissions._by_id.values()}
        permission_ids = []
        for key in keys:
            permission = existing.get(key) or self.add_permission(key)
            existing[key] = permission
            permission_ids.append(permission.id)
        role = Role(
            id=uuid4(),
            name=name,
            display_name=name.title(),
            priority=priority,
            is_system_role=is_system_role,
            permission_ids=permission_ids,
        )
        self.roles.add_role(role)
        return role

    def permission_for(self, key: str) -> Permission:
        for permission in self.permissions._by_id.values():
            if permission.key == key:
                return permission
        return self.add_permission(key)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager that yields the same FakeUnitOfWork.

    Commits on clean exit so tests can observe transaction boundaries.
    """

    @asynccontextmanager
    async def _factory():
        yield fake_uow
        await fake_uow.commit()

    return _factory


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    mock = AsyncMock()
    mock.check.return_value = True
    return mock


@pytest.fixture
def mock_audit_recorder():
    """AsyncMock for AuditRecorder."""
    return AsyncMock()


@pytest.fixture
def admin_deps(uow_factory, mock_permission_checker, mock_audit_recorder) -> dict:
    """Constructor kwargs shared by administrative use cases."""
    return {
        "unit_of_work_factory": uow_factory,
        "permission_checker": mock_permission_checker,
        "audit_recorder": mock_audit_recorder,
    }


@pytest.fixture
def actor_id() -> UUID:
    return uuid4()
