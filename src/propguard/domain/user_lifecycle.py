"""User lifecycle state machine.

pending -> active -> suspended/deactivated, suspended -> active.
Deactivation (soft delete) is allowed from any state and is terminal:
suspend and reactivate refuse to act on a deactivated user.
"""

from dataclasses import replace
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from propguard.domain.entities import User
from propguard.domain.exceptions import PreconditionFailed
from propguard.domain.value_objects import UserStatus


class LifecycleEvent(StrEnum):
    """Events that move a user between statuses."""

    APPROVE = "approve"
    SUSPEND = "suspend"
    REACTIVATE = "reactivate"
    DEACTIVATE = "deactivate"


_LIVE = frozenset({UserStatus.PENDING, UserStatus.ACTIVE, UserStatus.SUSPENDED})

# event -> (allowed source statuses, target status)
TRANSITIONS: dict[LifecycleEvent, tuple[frozenset[UserStatus], UserStatus]] = {
    LifecycleEvent.APPROVE: (frozenset({UserStatus.PENDING}), UserStatus.ACTIVE),
    LifecycleEvent.SUSPEND: (_LIVE, UserStatus.SUSPENDED),
    LifecycleEvent.REACTIVATE: (_LIVE, UserStatus.ACTIVE),
    LifecycleEvent.DEACTIVATE: (frozenset(UserStatus), UserStatus.DEACTIVATED),
}

_REJECTIONS = {
    LifecycleEvent.APPROVE: "User is not pending approval",
    LifecycleEvent.SUSPEND: "Cannot suspend a deactivated user",
    LifecycleEvent.REACTIVATE: "Cannot reactivate a deactivated user",
}


def can_transition(status: UserStatus, event: LifecycleEvent) -> bool:
    sources, _ = TRANSITIONS[event]
    return status in sources


def transition(
    user: User,
    event: LifecycleEvent,
    now: datetime,
    actor_id: UUID | None = None,
) -> User:
    """Return a copy of user moved by event. Raises PreconditionFailed if not allowed."""
    if not can_transition(user.status, event):
        raise PreconditionFailed(
            _REJECTIONS.get(event, f"Invalid transition {event} from {user.status}")
        )
    _, target = TRANSITIONS[event]
    changed = replace(user, status=target, updated_at=now)
    if event is LifecycleEvent.APPROVE:
        changed = replace(changed, approved_at=now, approved_by=actor_id)
    return changed
