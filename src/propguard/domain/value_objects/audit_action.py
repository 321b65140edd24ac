"""Audit action labels."""

from enum import StrEnum

from propguard.domain.value_objects.override_kind import OverrideKind


class AuditAction(StrEnum):
    """Labels passed to the audit recorder."""

    USER_APPROVED = "user.approved"
    USER_SUSPENDED = "user.suspended"
    USER_REACTIVATED = "user.reactivated"
    USER_DEACTIVATED = "user.deactivated"
    ROLES_ASSIGNED = "user.roles_assigned"
    PERMISSIONS_GRANTED = "user.permissions_granted"
    PERMISSIONS_DENIED = "user.permissions_denied"
    PROPERTIES_ASSIGNED = "user.properties_assigned"
    PROPERTY_UNASSIGNED = "user.property_unassigned"
    ROLE_CREATED = "role.created"
    ROLE_UPDATED = "role.updated"
    ROLE_DELETED = "role.deleted"

    @classmethod
    def for_override_kind(cls, kind: OverrideKind) -> "AuditAction":
        """Label for a permission override batch, keyed on the first item's kind."""
        if kind == OverrideKind.DENY:
            return cls.PERMISSIONS_DENIED
        return cls.PERMISSIONS_GRANTED
