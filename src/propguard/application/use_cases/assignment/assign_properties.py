"""Assign and unassign properties use cases."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from propguard.application.dto.user_dto import AssignPropertiesInput, UserView
from propguard.application.use_cases.assignment.writers import (
    write_property_assignments,
)
from propguard.application.use_cases.base import AdminUseCase
from propguard.application.user_views import build_user_view
from propguard.domain.exceptions import NotFound, PreconditionFailed
from propguard.domain.value_objects import AdminPermission, AuditAction

logger = logging.getLogger(__name__)


class AssignPropertiesUseCase(AdminUseCase):
    """Assign properties to a user."""

    async def execute(
        self, actor_id: UUID, input_data: AssignPropertiesInput
    ) -> UserView:
        """Assign properties. Only a replace marks the first property as primary."""
        await self._authorize(actor_id, AdminPermission.USERS_MANAGE)
        if not input_data.property_ids:
            raise PreconditionFailed("At least one property id is required")

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_for_update(input_data.user_id)
            if not user:
                raise NotFound("User", str(input_data.user_id))

            previous = await uow.property_assignments.list_by_user(user.id)
            await write_property_assignments(
                uow,
                user.id,
                input_data.property_ids,
                replace_existing=input_data.replace_existing,
                mark_primary=input_data.replace_existing,
                actor_id=actor_id,
                now=now,
            )
            view = await build_user_view(uow, user, now)

        logger.info(
            "Assigned %d property(ies) to user %s (replace=%s)",
            len(input_data.property_ids),
            user.id,
            input_data.replace_existing,
        )
        await self._audit(
            AuditAction.PROPERTIES_ASSIGNED,
            user.id,
            actor_id,
            {"property_ids": [str(p.property_id) for p in previous]},
            {"property_ids": [str(p.property_id) for p in view.properties]},
        )
        return view


class UnassignPropertyUseCase(AdminUseCase):
    """Remove a single property assignment from a user."""

    async def execute(self, actor_id: UUID, user_id: UUID, property_id: UUID) -> UserView:
        await self._authorize(actor_id, AdminPermission.USERS_MANAGE)

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_for_update(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            removed = await uow.property_assignments.delete(user_id, property_id)
            if not removed:
                raise NotFound("PropertyAssignment", f"{user_id}/{property_id}")
            view = await build_user_view(uow, user, now)

        logger.info("Unassigned property %s from user %s", property_id, user_id)
        await self._audit(
            AuditAction.PROPERTY_UNASSIGNED,
            user_id,
            actor_id,
            {"property_id": str(property_id)},
            None,
        )
        return view
