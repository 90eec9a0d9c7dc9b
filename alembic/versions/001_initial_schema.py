"""initial schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Bearer tokens, written by the accounts subsystem
    op.create_table(
        "tokens",
        sa.Column("token", sa.String(512), primary_key=True),
        sa.Column("username", sa.String(256), nullable=False),
        sa.Column("expiry", sa.DateTime(timezone=True), nullable=False),
    )

    # Listed items; ids are random 64-bit values assigned by the API
    op.create_table(
        "items",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("type", sa.SmallInteger(), nullable=False),
        sa.Column("name", sa.String(512), nullable=False),
        sa.Column("seller", sa.String(256), nullable=False),
        sa.Column("image", sa.String(2048), nullable=False),
        sa.Column("condition", sa.SmallInteger(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
    )

    op.create_index("ix_items_type", "items", ["type"])


def downgrade() -> None:
    op.drop_index("ix_items_type", table_name="items")
    op.drop_table("items")
    op.drop_table("tokens")
