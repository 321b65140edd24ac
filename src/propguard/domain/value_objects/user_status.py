"""User lifecycle status."""

from enum import StrEnum


class UserStatus(StrEnum):
    """Status of a user account."""

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DEACTIVATED = "deactivated"
