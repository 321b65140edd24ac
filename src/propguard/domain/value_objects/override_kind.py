"""Direct permission override kinds."""

from enum import StrEnum


class OverrideKind(StrEnum):
    """Whether a direct override grants or denies a permission."""

    GRANT = "grant"
    DENY = "deny"
