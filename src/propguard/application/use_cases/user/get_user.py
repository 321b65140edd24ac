"""Get user view use case."""

from datetime import UTC, datetime
from uuid import UUID

from propguard.application.dto.user_dto import UserView
from propguard.application.ports import PermissionChecker
from propguard.application.user_views import build_user_view
from propguard.domain.exceptions import NotFound, PermissionDenied
from propguard.domain.value_objects import AdminPermission


class GetUserUseCase:
    """Get a user with roles, overrides, effective permissions and properties."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: UUID, user_id: UUID) -> UserView:
        """Get user view. Users may always read their own profile."""
        if actor_id != user_id:
            has_read = await self._permission_checker.check(
                actor_id, AdminPermission.USERS_READ
            )
            if not has_read:
                raise PermissionDenied("User does not have 'users:read' permission")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            return await build_user_view(uow, user, datetime.now(UTC))
