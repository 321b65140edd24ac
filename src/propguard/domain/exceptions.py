"""Domain exceptions."""


class PropGuardError(Exception):
    """Base exception for PropGuard."""

    pass


class PermissionDenied(PropGuardError):
    """Acting user does not hold the permission required for the operation."""

    pass


class NotFound(PropGuardError):
    """Requested record was not found."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class PreconditionFailed(PropGuardError):
    """Invalid state transition or missing required input."""

    pass


class Conflict(PropGuardError):
    """Operation conflicts with existing records (duplicate name, role in use)."""

    pass


class DependencyFailure(PropGuardError):
    """Record store rejected an operation."""

    pass
