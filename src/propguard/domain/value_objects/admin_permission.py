"""Permissions that gate administrative operations."""

from enum import StrEnum


class AdminPermission(StrEnum):
    """Permission keys required by user and role administration."""

    USERS_READ = "users:read"
    USERS_MANAGE = "users:manage"
    USERS_DELETE = "users:delete"
    ROLES_MANAGE = "roles:manage"
