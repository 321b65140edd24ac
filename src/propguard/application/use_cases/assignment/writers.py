"""Write helpers shared by assignment use cases and user approval.

All helpers run inside the caller's unit of work so that a replace
(delete then insert) commits as one transaction.
"""

from datetime import datetime
from uuid import UUID

from propguard.application.dto.user_dto import PermissionOverrideItem
from propguard.application.ports import UnitOfWork
from propguard.domain.entities import (
    PermissionOverride,
    PropertyAssignment,
    RoleAssignment,
)


async def write_role_assignments(
    uow: UnitOfWork,
    user_id: UUID,
    role_ids: list[UUID],
    property_id: UUID | None,
    replace_existing: bool,
    actor_id: UUID | None,
    now: datetime,
) -> list[RoleAssignment]:
    """Replace or merge role assignments, one row per distinct role id."""
    if replace_existing:
        await uow.role_assignments.delete_by_user(user_id, property_id)
    assignments = [
        RoleAssignment(
            user_id=user_id,
            role_id=role_id,
            property_id=property_id,
            assigned_by=actor_id,
            assigned_at=now,
        )
        for role_id in dict.fromkeys(role_ids)
    ]
    await uow.role_assignments.upsert_batch(assignments)
    return assignments


async def write_permission_overrides(
    uow: UnitOfWork,
    user_id: UUID,
    items: list[PermissionOverrideItem],
    replace_existing: bool,
    actor_id: UUID | None,
    now: datetime,
) -> list[PermissionOverride]:
    """Replace or upsert overrides.

    Within one batch the last item per key wins and takes that item's position
    in the application order.
    """
    if replace_existing:
        await uow.permission_overrides.delete_by_user(user_id)
    by_key: dict[tuple[UUID, UUID | None], PermissionOverride] = {}
    for item in items:
        key = (item.permission_id, item.property_id)
        by_key.pop(key, None)
        by_key[key] = PermissionOverride(
            user_id=user_id,
            permission_id=item.permission_id,
            override_kind=item.override_kind,
            property_id=item.property_id,
            expires_at=item.expires_at,
            reason=item.reason,
            granted_by=actor_id,
            granted_at=now,
        )
    overrides = list(by_key.values())
    await uow.permission_overrides.upsert_batch(overrides)
    return overrides


async def write_property_assignments(
    uow: UnitOfWork,
    user_id: UUID,
    property_ids: list[UUID],
    replace_existing: bool,
    mark_primary: bool,
    actor_id: UUID | None,
    now: datetime,
) -> list[PropertyAssignment]:
    """Replace or merge property assignments.

    When mark_primary is set the first property becomes primary. Otherwise
    rows that already exist keep their primary flag.
    """
    if replace_existing:
        await uow.property_assignments.delete_by_user(user_id)
        existing_primary: set[UUID] = set()
    else:
        existing_primary = {
            p.property_id
            for p in await uow.property_assignments.list_by_user(user_id)
            if p.is_primary
        }
    assignments = []
    for index, property_id in enumerate(dict.fromkeys(property_ids)):
        if mark_primary:
            is_primary = index == 0
        else:
            is_primary = property_id in existing_primary
        assignments.append(
            PropertyAssignment(
                user_id=user_id,
                property_id=property_id,
                is_primary=is_primary,
                assigned_by=actor_id,
                assigned_at=now,
            )
        )
    await uow.property_assignments.upsert_batch(assignments)
    return assignments
