"""Resolve effective permissions use case."""

from datetime import UTC, datetime
from uuid import UUID

from propguard.application.user_views import load_effective_permissions


class ResolveEffectivePermissionsUseCase:
    """Compute the flat effective permission set of a user.

    Reads only; safe for concurrent use. Unknown users resolve to an empty set.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: UUID, now: datetime | None = None) -> frozenset[str]:
        now = now or datetime.now(UTC)
        async with self._uow_factory() as uow:
            return await load_effective_permissions(uow, user_id, now)
