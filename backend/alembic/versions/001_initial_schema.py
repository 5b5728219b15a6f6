"""Initial schema: todos, organisations, memberships, records.

Revision ID: 001
Revises: None
Create Date: 2026-10-19

Every table carries id (UUID), created_at, updated_at, and the deleted_at
soft-delete tombstone.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list:
    return [
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create all four resource tables."""

    # -- todos --
    op.create_table(
        "todos",
        *_base_columns(),
        sa.Column("title", sa.String, nullable=False),
        sa.CheckConstraint("length(title) > 0", name="ck_todos_title_not_empty"),
    )
    op.create_index("ix_todos_deleted_at", "todos", ["deleted_at"])

    # -- organisations --
    op.create_table(
        "organisations",
        *_base_columns(),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("owner_id", sa.Uuid, nullable=False),
        sa.CheckConstraint(
            "length(title) > 0", name="ck_organisations_title_not_empty"
        ),
    )
    op.create_index("ix_organisations_deleted_at", "organisations", ["deleted_at"])
    op.create_index("ix_organisations_owner_id", "organisations", ["owner_id"])

    # -- memberships --
    op.create_table(
        "memberships",
        *_base_columns(),
        sa.Column(
            "org_id", sa.Uuid, sa.ForeignKey("organisations.id"), nullable=False
        ),
        sa.Column("user_id", sa.Uuid, nullable=False),
    )
    op.create_index("ix_memberships_deleted_at", "memberships", ["deleted_at"])
    op.create_index("ix_memberships_org_id", "memberships", ["org_id"])
    op.create_index("ix_memberships_user_id", "memberships", ["user_id"])

    # -- records --
    op.create_table(
        "records",
        *_base_columns(),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("owner_id", sa.Uuid, nullable=False),
        sa.CheckConstraint("length(title) > 0", name="ck_records_title_not_empty"),
    )
    op.create_index("ix_records_deleted_at", "records", ["deleted_at"])
    op.create_index("ix_records_owner_id", "records", ["owner_id"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index("ix_records_owner_id", table_name="records")
    op.drop_index("ix_records_deleted_at", table_name="records")
    op.drop_table("records")
    op.drop_index("ix_memberships_user_id", table_name="memberships")
    op.drop_index("ix_memberships_org_id", table_name="memberships")
    op.drop_index("ix_memberships_deleted_at", table_name="memberships")
    op.drop_table("memberships")
    op.drop_index("ix_organisations_owner_id", table_name="organisations")
    op.drop_index("ix_organisations_deleted_at", table_name="organisations")
    op.drop_table("organisations")
    op.drop_index("ix_todos_deleted_at", table_name="todos")
    op.drop_table("todos")
