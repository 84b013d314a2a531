"""Create line version rating table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "line_version_rating",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("owner_id", sa.String(length=32), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["jhi_user.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_line_version_rating_owner_id"), "line_version_rating", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_line_version_rating_owner_id"), table_name="line_version_rating")
    op.drop_table("line_version_rating")
