"""Initial schema - users, permission catalog, roles and assignment tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("approved_by", sa.UUID(), nullable=True),
        sa.CheckConstraint(
            "status IN ('pending', 'active', 'suspended', 'deactivated')",
            name="ck_app_user_status",
        ),
    )
    op.create_index("ix_app_user_email", "app_user", ["email"], unique=True)

    op.create_table(
        "permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("resource", sa.String(100), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index("ix_permission_resource_action", "permission", ["resource", "action"], unique=True)

    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("is_system_role", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("permission_id", sa.UUID(), sa.ForeignKey("permission.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "user_role",
        sa.Column("seq", sa.BigInteger(), sa.Identity(always=True), primary_key=True),
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id"), nullable=False),
        sa.Column("property_id", sa.UUID(), nullable=True),
        sa.Column("assigned_by", sa.UUID(), nullable=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.execute(
        "CREATE UNIQUE INDEX ix_user_role_scope ON user_role "
        "(user_id, role_id, property_id) NULLS NOT DISTINCT"
    )
    op.create_index("ix_user_role_role_id", "user_role", ["role_id"])

    # Expired rows are kept for history; resolution filters on expires_at.
    op.create_table(
        "user_permission",
        sa.Column("seq", sa.BigInteger(), sa.Identity(always=True), primary_key=True),
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("permission_id", sa.UUID(), sa.ForeignKey("permission.id"), nullable=False),
        sa.Column("override_type", sa.String(10), nullable=False),
        sa.Column("property_id", sa.UUID(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("granted_by", sa.UUID(), nullable=True),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("override_type IN ('grant', 'deny')", name="ck_user_permission_type"),
    )
    op.execute(
        "CREATE UNIQUE INDEX ix_user_permission_scope ON user_permission "
        "(user_id, permission_id, property_id) NULLS NOT DISTINCT"
    )

    op.create_table(
        "user_property",
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("property_id", sa.UUID(), primary_key=True),
        sa.Column("is_primary", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("assigned_by", sa.UUID(), nullable=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.execute("""
        INSERT INTO permission (id, resource, action, description) VALUES
        (gen_random_uuid(), 'users', 'read', 'View users'),
        (gen_random_uuid(), 'users', 'manage', 'Approve, suspend and assign users'),
        (gen_random_uuid(), 'users', 'delete', 'Deactivate users'),
        (gen_random_uuid(), 'roles', 'manage', 'Administer roles and permission overrides'),
        (gen_random_uuid(), 'properties', 'read', 'View properties'),
        (gen_random_uuid(), 'properties', 'update', 'Edit properties'),
        (gen_random_uuid(), 'bookings', 'read', 'View bookings'),
        (gen_random_uuid(), 'bookings', 'create', 'Create bookings'),
        (gen_random_uuid(), 'bookings', 'update', 'Edit bookings')
    """)
    op.execute("""
        INSERT INTO role (id, name, display_name, description, priority, is_system_role) VALUES
        (gen_random_uuid(), 'super_admin', 'Super Admin', 'Full access', 1000, true),
        (gen_random_uuid(), 'manager', 'Property Manager', 'Manage properties and bookings', 500, true),
        (gen_random_uuid(), 'staff', 'Staff', 'Day-to-day booking work', 100, true)
    """)
    op.execute("""
        INSERT INTO role_permission (role_id, permission_id)
        SELECT r.id, p.id FROM role r CROSS JOIN permission p WHERE r.name = 'super_admin'
    """)
    op.execute("""
        INSERT INTO role_permission (role_id, permission_id)
        SELECT r.id, p.id FROM role r JOIN permission p
          ON p.resource IN ('properties', 'bookings') OR (p.resource = 'users' AND p.action = 'read')
        WHERE r.name = 'manager'
    """)
    op.execute("""
        INSERT INTO role_permission (role_id, permission_id)
        SELECT r.id, p.id FROM role r JOIN permission p
          ON p.resource = 'bookings' OR (p.resource = 'properties' AND p.action = 'read')
        WHERE r.name = 'staff'
    """)


def downgrade() -> None:
    op.drop_table("user_property")
    op.drop_table("user_permission")
    op.drop_table("user_role")
    op.drop_table("role_permission")
    op.drop_table("role")
    op.drop_table("permission")
    op.drop_table("app_user")
