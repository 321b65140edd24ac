"""Assign roles use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from propguard.application.dto.user_dto import AssignRolesInput, UserView
from propguard.application.use_cases.assignment.writers import write_role_assignments
from propguard.application.use_cases.base import AdminUseCase
from propguard.application.user_views import build_user_view
from propguard.domain.exceptions import NotFound, PreconditionFailed
from propguard.domain.value_objects import AdminPermission, AuditAction

logger = logging.getLogger(__name__)


class AssignRolesUseCase(AdminUseCase):
    """Assign roles to a user, globally or scoped to one property."""

    async def execute(self, actor_id: UUID, input_data: AssignRolesInput) -> UserView:
        """Assign roles. With replace_existing, prior assignments in scope are removed first.

        Without a property scope the replace removes assignments in every scope.
        """
        await self._authorize(actor_id, AdminPermission.ROLES_MANAGE)
        if not input_data.role_ids:
            raise PreconditionFailed("At least one role id is required")

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_for_update(input_data.user_id)
            if not user:
                raise NotFound("User", str(input_data.user_id))

            wanted = set(input_data.role_ids)
            found = {r.id for r in await uow.roles.list_by_ids(wanted)}
            missing = wanted - found
            if missing:
                raise NotFound("Role", ", ".join(sorted(str(m) for m in missing)))

            previous = await uow.role_assignments.list_by_user(user.id)
            await write_role_assignments(
                uow,
                user.id,
                input_data.role_ids,
                input_data.property_id,
                input_data.replace_existing,
                actor_id,
                now,
            )
            view = await build_user_view(uow, user, now)

        logger.info(
            "Assigned %d role(s) to user %s (replace=%s)",
            len(wanted),
            user.id,
            input_data.replace_existing,
        )
        await self._audit(
            AuditAction.ROLES_ASSIGNED,
            user.id,
            actor_id,
            {"role_ids": sorted({str(a.role_id) for a in previous})},
            {"role_ids": sorted({str(a.role_id) for a in view.role_assignments})},
        )
        return view
