"""Create user table

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "jhi_user",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("login", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("password_hash", sa.String(length=60), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=True),
        sa.Column("last_name", sa.String(length=50), nullable=True),
        sa.Column("image_url", sa.String(length=256), nullable=True),
        sa.Column("activated", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("lang_key", sa.String(length=10), nullable=False, server_default="en"),
        sa.Column("activation_key", sa.String(length=20), nullable=True),
        sa.Column("reset_key", sa.String(length=20), nullable=True),
        sa.Column("reset_date", sa.DateTime(), nullable=True),
        sa.Column("created_by", sa.String(length=50), nullable=False, server_default="system"),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("last_modified_by", sa.String(length=50), nullable=True),
        sa.Column("last_modified_date", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_jhi_user_login"), "jhi_user", ["login"], unique=True)
    op.create_index(op.f("ix_jhi_user_email"), "jhi_user", ["email"], unique=True)
    op.create_index(op.f("ix_jhi_user_activation_key"), "jhi_user", ["activation_key"], unique=False)
    op.create_index(op.f("ix_jhi_user_reset_key"), "jhi_user", ["reset_key"], unique=False)
    op.create_index(op.f("ix_jhi_user_created_date"), "jhi_user", ["created_date"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_jhi_user_created_date"), table_name="jhi_user")
    op.drop_index(op.f("ix_jhi_user_reset_key"), table_name="jhi_user")
    op.drop_index(op.f("ix_jhi_user_activation_key"), table_name="jhi_user")
    op.drop_index(op.f("ix_jhi_user_email"), table_name="jhi_user")
    op.drop_index(op.f("ix_jhi_user_login"), table_name="jhi_user")
    op.drop_table("jhi_user")
