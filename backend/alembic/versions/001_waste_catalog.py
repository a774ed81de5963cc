"""Waste catalog schema: waste_type and waste.

Revision ID: 001_waste_catalog
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_waste_catalog"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "waste_type",
        sa.Column("waste_type_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("waste_type_name", sa.String(100), nullable=False),
        sa.Column("image", sa.String(500), nullable=True),
    )

    op.create_table(
        "waste",
        sa.Column("waste_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("waste_name", sa.String(200), nullable=False),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column(
            "waste_type_id", sa.Integer,
            sa.ForeignKey("waste_type.waste_type_id"), nullable=False,
        ),
    )
    op.create_index("ix_waste_waste_type_id", "waste", ["waste_type_id"])


def downgrade() -> None:
    op.drop_index("ix_waste_waste_type_id", table_name="waste")
    op.drop_table("waste")
    op.drop_table("waste_type")
