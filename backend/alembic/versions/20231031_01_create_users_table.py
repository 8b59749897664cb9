"""Create users table"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20231031_01"
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum("unspecified", "user", "admin", name="user_role", create_constraint=True)

timestamp = sa.DateTime(timezone=True).with_variant(postgresql.TIMESTAMP(precision=3, timezone=True), "postgresql")


def _now_default(dialect: str) -> sa.TextClause:
    # SQLite CURRENT_TIMESTAMP only has second resolution
    if dialect == "sqlite":
        return sa.text("(strftime('%Y-%m-%d %H:%M:%f', 'now'))")
    return sa.text("CURRENT_TIMESTAMP")


def upgrade() -> None:
    now = _now_default(op.get_bind().dialect.name)

    # On PostgreSQL the user_role type is created together with the table.
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"), nullable=False, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("created_at", timestamp, server_default=now, nullable=False),
        sa.Column("updated_at", timestamp, server_default=now, nullable=False),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.UniqueConstraint("name", name="users_name_key"),
    )


def downgrade() -> None:
    op.drop_table("users")
    user_role.drop(op.get_bind(), checkfirst=True)
