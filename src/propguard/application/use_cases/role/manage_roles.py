"""Role catalog use case - list, create, update and delete roles."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from uuid import UUID, uuid4

from propguard.application.dto.role_dto import CreateRoleInput, UpdateRoleInput
from propguard.application.ports import UnitOfWork
from propguard.application.use_cases.base import AdminUseCase
from propguard.domain.entities import Permission, Role
from propguard.domain.exceptions import Conflict, NotFound
from propguard.domain.value_objects import AdminPermission, AuditAction

logger = logging.getLogger(__name__)


def _role_snapshot(role: Role) -> dict[str, object]:
    return {
        "name": role.name,
        "display_name": role.display_name,
        "priority": role.priority,
        "permission_ids": sorted(str(p) for p in role.permission_ids),
    }


async def _ensure_permissions_exist(uow: UnitOfWork, permission_ids: Iterable[UUID]) -> None:
    wanted = set(permission_ids)
    if not wanted:
        return
    found = {p.id for p in await uow.permissions.list_by_ids(wanted)}
    missing = wanted - found
    if missing:
        raise NotFound("Permission", ", ".join(sorted(str(m) for m in missing)))


class ManageRolesUseCase(AdminUseCase):
    """Administer the role catalog. Reads are open, writes need roles:manage."""

    async def list_roles(self) -> list[Role]:
        """All roles, highest priority first."""
        async with self._uow_factory() as uow:
            return await uow.roles.list_all()

    async def get_role(self, role_id: UUID) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))
            return role

    async def list_permissions(self) -> list[Permission]:
        """Permission catalog ordered by resource, action."""
        async with self._uow_factory() as uow:
            return await uow.permissions.list_all()

    async def permissions_by_resource(self) -> dict[str, list[Permission]]:
        grouped: dict[str, list[Permission]] = {}
        for permission in await self.list_permissions():
            grouped.setdefault(permission.resource, []).append(permission)
        return grouped

    async def create_role(self, actor_id: UUID, input_data: CreateRoleInput) -> Role:
        """Create a custom (non-system) role."""
        await self._authorize(actor_id, AdminPermission.ROLES_MANAGE)

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(input_data.name):
                raise Conflict(f"A role named {input_data.name!r} already exists")
            await _ensure_permissions_exist(uow, input_data.permission_ids)

            role = Role(
                id=uuid4(),
                name=input_data.name,
                display_name=input_data.display_name,
                description=input_data.description,
                priority=input_data.priority,
                is_system_role=False,
                permission_ids=list(dict.fromkeys(input_data.permission_ids)),
            )
            await uow.roles.create(role)
            if role.permission_ids:
                await uow.roles.set_permissions(role.id, role.permission_ids)

        logger.info("Created role %s (%s)", role.name, role.id)
        await self._audit(
            AuditAction.ROLE_CREATED, None, actor_id, None, _role_snapshot(role)
        )
        return role

    async def update_role(self, actor_id: UUID, input_data: UpdateRoleInput) -> Role:
        """Update a custom role. Supplying permission_ids replaces the bundle."""
        await self._authorize(actor_id, AdminPermission.ROLES_MANAGE)

        async with self._uow_factory() as uow:
            current = await uow.roles.get_by_id(input_data.role_id)
            if not current:
                raise NotFound("Role", str(input_data.role_id))
            if current.is_system_role:
                raise Conflict("System roles cannot be modified")

            updated = replace(current)
            if input_data.display_name is not None:
                updated.display_name = input_data.display_name
            if input_data.description is not None:
                updated.description = input_data.description
            if input_data.priority is not None:
                updated.priority = input_data.priority
            await uow.roles.update(updated)

            if input_data.permission_ids is not None:
                await _ensure_permissions_exist(uow, input_data.permission_ids)
                updated.permission_ids = list(dict.fromkeys(input_data.permission_ids))
                await uow.roles.set_permissions(updated.id, updated.permission_ids)

        logger.info("Updated role %s (%s)", updated.name, updated.id)
        await self._audit(
            AuditAction.ROLE_UPDATED,
            None,
            actor_id,
            _role_snapshot(current),
            _role_snapshot(updated),
        )
        return updated

    async def delete_role(self, actor_id: UUID, role_id: UUID) -> None:
        """Delete a custom role that no user holds."""
        await self._authorize(actor_id, AdminPermission.ROLES_MANAGE)

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))
            if role.is_system_role:
                raise Conflict("System roles cannot be deleted")
            if await uow.role_assignments.exists_for_role(role_id):
                raise Conflict(
                    "Role is assigned to users; remove it from users first"
                )
            await uow.roles.delete(role_id)

        logger.info("Deleted role %s (%s)", role.name, role.id)
        await self._audit(
            AuditAction.ROLE_DELETED, None, actor_id, _role_snapshot(role), None
        )
