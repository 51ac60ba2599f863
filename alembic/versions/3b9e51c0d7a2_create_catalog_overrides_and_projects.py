"""create catalog_overrides and projects

Revision ID: 3b9e51c0d7a2
Revises:
Create Date: 2026-10-12 09:41:03.118204

Base schema. Databases created by Base.metadata.create_all() are stamped
at this revision on startup, so table creation here is idempotent.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3b9e51c0d7a2'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_exists(table_name):
    """Check if a table exists."""
    bind = op.get_bind()
    insp = inspect(bind)
    return table_name in insp.get_table_names()


def upgrade() -> None:
    if not _table_exists("catalog_overrides"):
        op.create_table(
            "catalog_overrides",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("family", sa.String(), nullable=False),
            sa.Column("category", sa.String(), nullable=False),
            sa.Column("key", sa.String(), nullable=False),
            sa.Column("label", sa.String(), nullable=True),
            sa.Column("price", sa.Float(), nullable=True),
            sa.Column("attributes", sa.JSON(), nullable=True),
            sa.Column("deleted", sa.Boolean(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
            sa.UniqueConstraint("family", "category", "key", name="uq_catalog_override_key"),
        )
        op.create_index("ix_catalog_overrides_id", "catalog_overrides", ["id"])
        op.create_index("ix_catalog_overrides_family", "catalog_overrides", ["family"])

    if not _table_exists("projects"):
        op.create_table(
            "projects",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("project_number", sa.String(), nullable=False, unique=True),
            sa.Column("name", sa.String(), nullable=False),
            sa.Column("client_name", sa.String(), nullable=True),
            sa.Column("client_address", sa.Text(), nullable=True),
            sa.Column("client_phone", sa.String(), nullable=True),
            sa.Column("notes", sa.Text(), nullable=True),
            sa.Column("material_family", sa.String(), nullable=True),
            sa.Column("price_adjustment_pct", sa.Float(), nullable=True),
            sa.Column("units_json", sa.JSON(), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
        )
        op.create_index("ix_projects_id", "projects", ["id"])


def downgrade() -> None:
    op.drop_index("ix_projects_id", table_name="projects")
    op.drop_table("projects")
    op.drop_index("ix_catalog_overrides_family", table_name="catalog_overrides")
    op.drop_index("ix_catalog_overrides_id", table_name="catalog_overrides")
    op.drop_table("catalog_overrides")
