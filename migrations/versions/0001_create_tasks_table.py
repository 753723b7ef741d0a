"""create tasks table

Revision ID: 0001
Revises:
Create Date: 2024-01-15 10:30:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("id"),
    )
    op.create_index("idx_task_completed", "tasks", ["completed"])
    op.create_index("idx_task_created_at", "tasks", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_task_created_at", table_name="tasks")
    op.drop_index("idx_task_completed", table_name="tasks")
    op.drop_table("tasks")
