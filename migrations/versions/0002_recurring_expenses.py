"""recurring expenses

Revision ID: 0002
Revises: 0001
Create Date: 2026-03-02 18:40:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "recurring_expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("group_id", sa.Integer(), sa.ForeignKey("groups.id", ondelete="CASCADE"), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("day_of_month", sa.Integer(), nullable=False),
        sa.Column("used_by", sa.JSON(), nullable=False),
        sa.Column("created_by", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_added", sa.String(7), nullable=True),
    )
    op.create_index("ix_recurring_expenses_id", "recurring_expenses", ["id"])
    op.create_index("ix_recurring_expenses_group_id", "recurring_expenses", ["group_id"])


def downgrade():
    op.drop_table("recurring_expenses")
