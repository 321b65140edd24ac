"""Application ports - interfaces for external adapters."""

from propguard.application.ports.audit_recorder import AuditRecorder
from propguard.application.ports.permission_checker import PermissionChecker
from propguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditRecorder",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
