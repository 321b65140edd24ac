"""Approve pending user use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from propguard.application.dto.user_dto import ApproveUserInput, UserView
from propguard.application.use_cases.assignment.writers import (
    write_property_assignments,
    write_role_assignments,
)
from propguard.application.use_cases.base import AdminUseCase
from propguard.application.user_views import build_user_view
from propguard.domain.exceptions import NotFound
from propguard.domain.user_lifecycle import LifecycleEvent, transition
from propguard.domain.value_objects import AdminPermission, AuditAction

logger = logging.getLogger(__name__)


class ApproveUserUseCase(AdminUseCase):
    """Activate a pending user and seed default role and property assignments."""

    async def execute(self, actor_id: UUID, input_data: ApproveUserInput) -> UserView:
        """Approve user.

        An unknown default role name is skipped, not an error. Property ids,
        when given, are assigned with the first one marked primary.
        """
        await self._authorize(actor_id, AdminPermission.USERS_MANAGE)

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_for_update(input_data.user_id)
            if not user:
                raise NotFound("User", str(input_data.user_id))

            approved = transition(user, LifecycleEvent.APPROVE, now, actor_id)
            await uow.users.update(approved)

            role_id = None
            if input_data.default_role_name:
                role = await uow.roles.get_by_name(input_data.default_role_name)
                if role:
                    role_id = role.id
                    await write_role_assignments(
                        uow, user.id, [role.id], None, False, actor_id, now
                    )
                else:
                    logger.warning(
                        "Default role %r not found, approving user %s without it",
                        input_data.default_role_name,
                        user.id,
                    )

            if input_data.property_ids:
                await write_property_assignments(
                    uow,
                    user.id,
                    input_data.property_ids,
                    replace_existing=False,
                    mark_primary=True,
                    actor_id=actor_id,
                    now=now,
                )
            view = await build_user_view(uow, approved, now)

        logger.info("Approved user %s by %s", user.id, actor_id)
        await self._audit(
            AuditAction.USER_APPROVED,
            user.id,
            actor_id,
            {"status": str(user.status)},
            {
                "status": str(approved.status),
                "role_id": str(role_id) if role_id else None,
                "property_ids": [str(p) for p in input_data.property_ids],
            },
        )
        return view
