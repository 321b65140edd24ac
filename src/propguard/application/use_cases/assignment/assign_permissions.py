"""Assign permission overrides use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from propguard.application.dto.user_dto import AssignPermissionsInput, UserView
from propguard.application.use_cases.assignment.writers import (
    write_permission_overrides,
)
from propguard.application.use_cases.base import AdminUseCase
from propguard.application.user_views import build_user_view
from propguard.domain.entities import PermissionOverride
from propguard.domain.exceptions import NotFound, PreconditionFailed
from propguard.domain.value_objects import AdminPermission, AuditAction

logger = logging.getLogger(__name__)


def _snapshot(overrides: list[PermissionOverride]) -> list[dict[str, str | None]]:
    return [
        {
            "permission_id": str(o.permission_id),
            "override_kind": str(o.override_kind),
            "property_id": str(o.property_id) if o.property_id else None,
        }
        for o in overrides
    ]


class AssignPermissionsUseCase(AdminUseCase):
    """Grant or deny individual permissions directly to a user."""

    async def execute(
        self, actor_id: UUID, input_data: AssignPermissionsInput
    ) -> UserView:
        """Upsert overrides keyed on (user, permission, property scope)."""
        await self._authorize(actor_id, AdminPermission.ROLES_MANAGE)
        if not input_data.overrides:
            raise PreconditionFailed("At least one permission override is required")

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_for_update(input_data.user_id)
            if not user:
                raise NotFound("User", str(input_data.user_id))

            wanted = {o.permission_id for o in input_data.overrides}
            found = {p.id for p in await uow.permissions.list_by_ids(wanted)}
            missing = wanted - found
            if missing:
                raise NotFound(
                    "Permission", ", ".join(sorted(str(m) for m in missing))
                )

            previous = await uow.permission_overrides.list_by_user(user.id)
            written = await write_permission_overrides(
                uow,
                user.id,
                input_data.overrides,
                input_data.replace_existing,
                actor_id,
                now,
            )
            view = await build_user_view(uow, user, now)

        logger.info(
            "Wrote %d permission override(s) for user %s (replace=%s)",
            len(written),
            user.id,
            input_data.replace_existing,
        )
        # Label follows the first item even for mixed batches.
        action = AuditAction.for_override_kind(input_data.overrides[0].override_kind)
        await self._audit(
            action,
            user.id,
            actor_id,
            {"overrides": _snapshot(previous)},
            {"overrides": _snapshot(written)},
        )
        return view
