"""Permission key value object - "resource:action"."""

from dataclasses import dataclass

SEPARATOR = ":"


@dataclass(frozen=True)
class PermissionKey:
    """Resource/action pair identifying a capability."""

    resource: str
    action: str

    @classmethod
    def parse(cls, value: str) -> "PermissionKey":
        """Parse "resource:action". Raises ValueError on malformed input."""
        resource, sep, action = value.partition(SEPARATOR)
        if not sep or not resource or not action:
            raise ValueError(f"Invalid permission key: {value!r}")
        return cls(resource=resource, action=action)

    def __str__(self) -> str:
        return f"{self.resource}{SEPARATOR}{self.action}"
