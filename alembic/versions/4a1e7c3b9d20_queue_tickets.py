"""queue tickets

Revision ID: 4a1e7c3b9d20
Revises:
Create Date: 2026-10-18 09:30:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "4a1e7c3b9d20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "queue_tickets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=9), nullable=False),
        sa.UniqueConstraint("day", "number", name="uq_queue_tickets_day_number"),
    )
    op.create_index("ix_queue_tickets_day", "queue_tickets", ["day"])
    op.create_index("ix_queue_tickets_status", "queue_tickets", ["status"])


def downgrade() -> None:
    op.drop_index("ix_queue_tickets_status", table_name="queue_tickets")
    op.drop_index("ix_queue_tickets_day", table_name="queue_tickets")
    op.drop_table("queue_tickets")
