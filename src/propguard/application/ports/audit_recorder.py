"""Audit recorder port."""

from typing import Any, Protocol
from uuid import UUID


class AuditRecorder(Protocol):
    """Port receiving the final decision of every administrative write."""

    async def record(
        self,
        action: str,
        subject_user_id: UUID | None,
        actor_id: UUID | None,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> None: ...
