"""Audit recorders."""

import json
import logging
from typing import Any
from uuid import UUID

audit_logger = logging.getLogger("propguard.audit")


class LoggingAuditRecorder:
    """Writes one JSON audit line per administrative decision."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or audit_logger

    async def record(
        self,
        action: str,
        subject_user_id: UUID | None,
        actor_id: UUID | None,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> None:
        payload = {
            "action": str(action),
            "subject_user_id": str(subject_user_id) if subject_user_id else None,
            "actor_id": str(actor_id) if actor_id else None,
            "before": before,
            "after": after,
        }
        self._logger.info("audit %s", json.dumps(payload, sort_keys=True, default=str))


class NullAuditRecorder:
    """Discards audit records."""

    async def record(
        self,
        action: str,
        subject_user_id: UUID | None,
        actor_id: UUID | None,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> None:
        return None
