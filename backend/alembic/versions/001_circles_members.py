"""Initial schema: circles and members.

Revision ID: 001_circles_members
Revises: None
Create Date: 2026-10-16

Members hold every circle participant, owner included; circles.owner_id
points at the owner's member row.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_circles_members"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "circles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("capacity", sa.Integer, nullable=False),
        sa.Column("owner_id", sa.Integer, nullable=False),
    )

    op.create_table(
        "members",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("age", sa.Integer, nullable=False, server_default="20"),
        sa.Column("grade", sa.Integer, nullable=False),
        sa.Column("major", sa.String(255), nullable=False, server_default="Other"),
        sa.Column(
            "circle_id", sa.Integer,
            sa.ForeignKey("circles.id", ondelete="CASCADE"), nullable=True,
        ),
    )
    op.create_index("ix_members_circle_id", "members", ["circle_id"])


def downgrade() -> None:
    op.drop_index("ix_members_circle_id", table_name="members")
    op.drop_table("members")
    op.drop_table("circles")
