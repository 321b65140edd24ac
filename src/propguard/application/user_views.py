"""Read-side helpers: effective permissions and user views from a unit of work."""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from propguard.application.dto.user_dto import UserView
from propguard.application.ports import UnitOfWork
from propguard.domain.entities import (
    Permission,
    PermissionOverride,
    Role,
    RoleAssignment,
    User,
)
from propguard.domain.permission_resolution import (
    order_roles,
    resolve_effective_permissions,
)


async def load_assigned_roles(
    uow: UnitOfWork, assignments: Iterable[RoleAssignment]
) -> list[Role]:
    """Distinct roles in assignment order. Assignments to deleted roles are dropped."""
    role_ids = list(dict.fromkeys(a.role_id for a in assignments))
    if not role_ids:
        return []
    by_id = {r.id: r for r in await uow.roles.list_by_ids(role_ids)}
    return [by_id[rid] for rid in role_ids if rid in by_id]


async def load_catalog(
    uow: UnitOfWork,
    roles: Iterable[Role],
    overrides: Iterable[PermissionOverride],
) -> dict[UUID, Permission]:
    """Catalog entries referenced by roles and overrides."""
    ids = {pid for r in roles for pid in r.permission_ids}
    ids.update(o.permission_id for o in overrides)
    if not ids:
        return {}
    return {p.id: p for p in await uow.permissions.list_by_ids(ids)}


async def load_effective_permissions(
    uow: UnitOfWork, user_id: UUID, now: datetime
) -> frozenset[str]:
    """Re-read every source and resolve. No caching."""
    assignments = await uow.role_assignments.list_by_user(user_id)
    roles = await load_assigned_roles(uow, assignments)
    overrides = await uow.permission_overrides.list_active_by_user(user_id, now)
    catalog = await load_catalog(uow, roles, overrides)
    return resolve_effective_permissions(roles, overrides, catalog, now)


async def build_user_view(uow: UnitOfWork, user: User, now: datetime) -> UserView:
    """Assemble the user view returned by user operations."""
    assignments = await uow.role_assignments.list_by_user(user.id)
    roles = await load_assigned_roles(uow, assignments)
    overrides = await uow.permission_overrides.list_active_by_user(user.id, now)
    catalog = await load_catalog(uow, roles, overrides)
    effective = resolve_effective_permissions(roles, overrides, catalog, now)
    properties = await uow.property_assignments.list_by_user(user.id)
    return UserView(
        user=user,
        roles=order_roles(roles),
        role_assignments=assignments,
        direct_overrides=overrides,
        effective_permissions=sorted(effective),
        properties=sorted(properties, key=lambda p: not p.is_primary),
    )
