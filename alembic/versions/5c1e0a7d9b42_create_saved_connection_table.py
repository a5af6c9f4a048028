"""create saved_connection table

Revision ID: 5c1e0a7d9b42
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d9b42"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create saved_connection table."""
    op.create_table(
        "saved_connection",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("label_color", sa.String(32), nullable=True),
        sa.Column("connection_type", sa.String(32), nullable=True),
        sa.Column("host", sa.String(255), nullable=True),
        sa.Column("port", sa.Integer(), nullable=True),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("domain", sa.String(255), nullable=True),
        sa.Column("default_database", sa.String(1024), nullable=True),
        sa.Column("uri", sa.String(2048), nullable=True),
        sa.Column("unique_hash", sa.String(500), nullable=False),
        sa.Column("ssh_enabled", sa.Boolean(), nullable=False),
        sa.Column("ssh_host", sa.String(255), nullable=True),
        sa.Column("ssh_port", sa.Integer(), nullable=True),
        sa.Column("ssh_mode", sa.String(8), nullable=False),
        sa.Column("ssh_keyfile", sa.String(1024), nullable=True),
        sa.Column("ssh_username", sa.String(255), nullable=True),
        sa.Column("ssh_bastion_host", sa.String(255), nullable=True),
        sa.Column("ssl", sa.Boolean(), nullable=False),
        sa.Column("remember_password", sa.Boolean(), nullable=False),
        sa.Column("password", sa.Text(), nullable=True),
        sa.Column("ssh_keyfile_password", sa.Text(), nullable=True),
        sa.Column("ssh_password", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop saved_connection table."""
    op.drop_table("saved_connection")
