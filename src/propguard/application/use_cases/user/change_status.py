"""Suspend, reactivate and soft delete use cases."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from propguard.application.dto.user_dto import UserView
from propguard.application.use_cases.base import AdminUseCase
from propguard.application.user_views import build_user_view
from propguard.domain.exceptions import NotFound
from propguard.domain.user_lifecycle import LifecycleEvent, transition
from propguard.domain.value_objects import AdminPermission, AuditAction

logger = logging.getLogger(__name__)


class _StatusTransitionUseCase(AdminUseCase):
    """Apply one lifecycle event to a user."""

    event: LifecycleEvent
    required_permission: AdminPermission
    audit_action: AuditAction

    async def execute(self, actor_id: UUID, user_id: UUID) -> UserView:
        await self._authorize(actor_id, self.required_permission)

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_for_update(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            changed = transition(user, self.event, now, actor_id)
            await uow.users.update(changed)
            view = await build_user_view(uow, changed, now)

        logger.info(
            "User %s %s -> %s by %s", user_id, user.status, changed.status, actor_id
        )
        await self._audit(
            self.audit_action,
            user_id,
            actor_id,
            {"status": str(user.status)},
            {"status": str(changed.status)},
        )
        return view


class SuspendUserUseCase(_StatusTransitionUseCase):
    """Suspend a user."""

    event = LifecycleEvent.SUSPEND
    required_permission = AdminPermission.USERS_MANAGE
    audit_action = AuditAction.USER_SUSPENDED


class ReactivateUserUseCase(_StatusTransitionUseCase):
    """Reactivate a suspended user."""

    event = LifecycleEvent.REACTIVATE
    required_permission = AdminPermission.USERS_MANAGE
    audit_action = AuditAction.USER_REACTIVATED


class SoftDeleteUserUseCase(_StatusTransitionUseCase):
    """Deactivate a user. Role, override and property rows are kept."""

    event = LifecycleEvent.DEACTIVATE
    required_permission = AdminPermission.USERS_DELETE
    audit_action = AuditAction.USER_DEACTIVATED
