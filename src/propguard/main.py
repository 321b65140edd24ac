"""Application entry point and composition root."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from uuid import UUID

from propguard import __version__
from propguard.application.dto.user_dto import ApproveUserInput
from propguard.application.use_cases.assignment.assign_permissions import (
    AssignPermissionsUseCase,
)
from propguard.application.use_cases.assignment.assign_properties import (
    AssignPropertiesUseCase,
    UnassignPropertyUseCase,
)
from propguard.application.use_cases.assignment.assign_roles import AssignRolesUseCase
from propguard.application.use_cases.role.manage_roles import ManageRolesUseCase
from propguard.application.use_cases.user.approve_user import ApproveUserUseCase
from propguard.application.use_cases.user.change_status import (
    ReactivateUserUseCase,
    SoftDeleteUserUseCase,
    SuspendUserUseCase,
)
from propguard.application.use_cases.user.get_user import GetUserUseCase
from propguard.application.use_cases.user.resolve_permissions import (
    ResolveEffectivePermissionsUseCase,
)
from propguard.config import Settings, get_settings
from propguard.domain.exceptions import PropGuardError
from propguard.infrastructure.audit.logging_recorder import (
    LoggingAuditRecorder,
    NullAuditRecorder,
)
from propguard.infrastructure.permission.permission_checker import (
    AllowAllPermissionChecker,
    RBACPermissionChecker,
)
from propguard.infrastructure.persistence.postgres.connection import create_pool, open_pool
from propguard.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from propguard.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Wired use cases."""

    resolve_permissions: ResolveEffectivePermissionsUseCase
    get_user: GetUserUseCase
    approve_user: ApproveUserUseCase
    suspend_user: SuspendUserUseCase
    reactivate_user: ReactivateUserUseCase
    soft_delete_user: SoftDeleteUserUseCase
    assign_roles: AssignRolesUseCase
    assign_permissions: AssignPermissionsUseCase
    assign_properties: AssignPropertiesUseCase
    unassign_property: UnassignPropertyUseCase
    manage_roles: ManageRolesUseCase


def build_services(settings: Settings, uow_factory) -> Services:
    """Composition root - build use cases with all dependencies."""
    permission_checker = (
        RBACPermissionChecker(uow_factory)
        if settings.authorization_enabled
        else AllowAllPermissionChecker()
    )
    audit_recorder = LoggingAuditRecorder() if settings.audit_enabled else NullAuditRecorder()
    admin_deps = {
        "unit_of_work_factory": uow_factory,
        "permission_checker": permission_checker,
        "audit_recorder": audit_recorder,
    }
    return Services(
        resolve_permissions=ResolveEffectivePermissionsUseCase(uow_factory),
        get_user=GetUserUseCase(uow_factory, permission_checker),
        approve_user=ApproveUserUseCase(**admin_deps),
        suspend_user=SuspendUserUseCase(**admin_deps),
        reactivate_user=ReactivateUserUseCase(**admin_deps),
        soft_delete_user=SoftDeleteUserUseCase(**admin_deps),
        assign_roles=AssignRolesUseCase(**admin_deps),
        assign_permissions=AssignPermissionsUseCase(**admin_deps),
        assign_properties=AssignPropertiesUseCase(**admin_deps),
        unassign_property=UnassignPropertyUseCase(**admin_deps),
        manage_roles=ManageRolesUseCase(**admin_deps),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="propguard", description="PropGuard administration")
    parser.add_argument("--version", action="version", version=f"PropGuard v{__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("permissions", help="Print effective permissions of a user")
    p.add_argument("user_id", type=UUID)

    p = sub.add_parser("user", help="Print user view")
    p.add_argument("user_id", type=UUID)
    p.add_argument("--actor", type=UUID, required=True)

    sub.add_parser("roles", help="List roles by priority")

    p = sub.add_parser("approve", help="Approve a pending user")
    p.add_argument("user_id", type=UUID)
    p.add_argument("--actor", type=UUID, required=True)
    p.add_argument("--role", dest="default_role_name", default=None)
    p.add_argument("--property", dest="property_ids", type=UUID, action="append", default=[])

    for name in ("suspend", "reactivate", "delete"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a user")
        p.add_argument("user_id", type=UUID)
        p.add_argument("--actor", type=UUID, required=True)

    return parser


async def run_command(args: argparse.Namespace, services: Services) -> object:
    """Execute parsed command and return a JSON-serializable result."""
    if args.command == "permissions":
        return sorted(await services.resolve_permissions.execute(args.user_id))
    if args.command == "user":
        return (await services.get_user.execute(args.actor, args.user_id)).to_dict()
    if args.command == "roles":
        return [
            {"id": str(r.id), "name": r.name, "priority": r.priority}
            for r in await services.manage_roles.list_roles()
        ]
    if args.command == "approve":
        view = await services.approve_user.execute(
            args.actor,
            ApproveUserInput(
                user_id=args.user_id,
                default_role_name=args.default_role_name,
                property_ids=args.property_ids,
            ),
        )
        return view.to_dict()
    status_use_cases = {
        "suspend": services.suspend_user,
        "reactivate": services.reactivate_user,
        "delete": services.soft_delete_user,
    }
    view = await status_use_cases[args.command].execute(args.actor, args.user_id)
    return view.to_dict()


async def _run(args: argparse.Namespace, settings: Settings) -> object:
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    async with open_pool(pool):
        services = build_services(settings, create_uow_factory(pool))
        return await run_command(args, services)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    args = build_parser().parse_args(argv)
    try:
        result = asyncio.run(_run(args, settings))
    except PropGuardError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
