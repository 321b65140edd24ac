"""Property assignment entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PropertyAssignment:
    """User assigned to a property; at most one primary per replace batch."""

    user_id: UUID
    property_id: UUID
    is_primary: bool
    assigned_by: UUID | None
    assigned_at: datetime
