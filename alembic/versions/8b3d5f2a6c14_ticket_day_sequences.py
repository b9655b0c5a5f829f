"""ticket day sequences

Revision ID: 8b3d5f2a6c14
Revises: 4a1e7c3b9d20
Create Date: 2026-10-18 10:05:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "8b3d5f2a6c14"
down_revision = "4a1e7c3b9d20"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "ticket_day_sequences",
        sa.Column("day", sa.Date(), primary_key=True),
        sa.Column("last_number", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("ticket_day_sequences")
