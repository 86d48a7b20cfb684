"""create equipment table

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2025-01-06 10:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "equipment",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False),
        sa.Column("lastCleanedDate", sa.String(length=10), nullable=True),
        sa.Column("createdAt", sa.DateTime(), nullable=False),
        sa.Column("updatedAt", sa.DateTime(), nullable=False),
        sa.CheckConstraint("type IN ('Machine', 'Vessel', 'Tank', 'Mixer')", name="ck_equipment_type"),
        sa.CheckConstraint(
            "status IN ('Active', 'Inactive', 'Under Maintenance')",
            name="ck_equipment_status",
        ),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("equipment")
