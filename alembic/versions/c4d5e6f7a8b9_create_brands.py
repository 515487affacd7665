"""create brands table

Revision ID: c4d5e6f7a8b9
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c4d5e6f7a8b9"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "brands",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("first_letter", sa.String(8), nullable=True),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("sort", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("factory_status", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("show_status", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("product_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("product_comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("logo", sa.String(255), nullable=True),
        sa.Column("big_pic", sa.String(255), nullable=True),
        sa.Column("brand_story", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_brands_name", "brands", ["name"])
    # 목록 정렬용 — listing order is sort DESC
    op.create_index("ix_brands_show_status_sort", "brands", ["show_status", "sort"])


def downgrade() -> None:
    op.drop_index("ix_brands_show_status_sort", table_name="brands")
    op.drop_index("ix_brands_name", table_name="brands")
    op.drop_table("brands")
