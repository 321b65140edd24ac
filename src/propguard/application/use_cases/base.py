"""Shared plumbing for administrative use cases."""

import logging
from typing import Any
from uuid import UUID

from propguard.application.ports import AuditRecorder, PermissionChecker
from propguard.domain.exceptions import PermissionDenied

logger = logging.getLogger(__name__)


class AdminUseCase:
    """Base for use cases that authorize the actor and emit audit records."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        audit_recorder: AuditRecorder,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._audit_recorder = audit_recorder

    async def _authorize(self, actor_id: UUID, permission: str) -> None:
        """Raise PermissionDenied unless actor holds permission."""
        allowed = await self._permission_checker.check(actor_id, permission)
        if not allowed:
            raise PermissionDenied(f"User does not have '{permission}' permission")

    async def _audit(
        self,
        action: str,
        subject_user_id: UUID | None,
        actor_id: UUID | None,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> None:
        """Emit audit record. A recorder failure never fails the operation."""
        try:
            await self._audit_recorder.record(
                action, subject_user_id, actor_id, before, after
            )
        except Exception:
            logger.exception(
                "Audit recorder failed for %s on user %s", action, subject_user_id
            )
