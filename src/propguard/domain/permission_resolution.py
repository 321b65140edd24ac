"""Effective permission resolution.

Combines role bundles and direct overrides into the final set of
"resource:action" keys a user holds:

1. Roles are ordered by priority (descending, stable on assignment order).
   Role permissions are a pure union, so the ordering does not change the
   result; it is kept for priority-sensitive rules.
2. Active overrides are applied in ascending ``granted_at`` order, ties in
   the order given. A grant adds the key and clears an earlier deny; a deny
   marks the key denied.
3. Denied keys are removed from the granted set.

Scope is not filtered: global and property-scoped rows are pooled.
Overrides or role bundles pointing at permissions missing from the catalog
are skipped.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from uuid import UUID

from propguard.domain.entities import Permission, PermissionOverride, Role
from propguard.domain.value_objects import OverrideKind


def order_roles(roles: Iterable[Role]) -> list[Role]:
    """Roles by priority descending; sorted() keeps assignment order on ties."""
    return sorted(roles, key=lambda r: r.priority, reverse=True)


def order_overrides(
    overrides: Iterable[PermissionOverride], now: datetime
) -> list[PermissionOverride]:
    """Active overrides in application order (granted_at ascending, stable)."""
    active = [o for o in overrides if o.is_active(now)]
    return sorted(active, key=lambda o: o.granted_at)


def resolve_effective_permissions(
    roles: Sequence[Role],
    overrides: Sequence[PermissionOverride],
    catalog: Mapping[UUID, Permission],
    now: datetime,
) -> frozenset[str]:
    """Compute the effective permission key set. Never raises on dangling ids."""
    granted: set[str] = set()
    for role in order_roles(roles):
        for permission_id in role.permission_ids:
            permission = catalog.get(permission_id)
            if permission is not None:
                granted.add(permission.key)

    denied: set[str] = set()
    for override in order_overrides(overrides, now):
        permission = catalog.get(override.permission_id)
        if permission is None:
            continue
        key = permission.key
        if override.override_kind == OverrideKind.GRANT:
            granted.add(key)
            denied.discard(key)
        elif override.override_kind == OverrideKind.DENY:
            denied.add(key)

    return frozenset(granted - denied)
