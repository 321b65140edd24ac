"""Domain value objects."""

from propguard.domain.value_objects.admin_permission import AdminPermission
from propguard.domain.value_objects.audit_action import AuditAction
from propguard.domain.value_objects.override_kind import OverrideKind
from propguard.domain.value_objects.permission_key import PermissionKey
from propguard.domain.value_objects.user_status import UserStatus

__all__ = [
    "AdminPermission",
    "AuditAction",
    "OverrideKind",
    "PermissionKey",
    "UserStatus",
]
