"""User entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from propguard.domain.value_objects import UserStatus


@dataclass
class User:
    """User account with lifecycle status."""

    id: UUID
    email: str
    status: UserStatus
    created_at: datetime
    updated_at: datetime
    full_name: str | None = None
    approved_at: datetime | None = None
    approved_by: UUID | None = None
