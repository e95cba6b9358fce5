"""Add entry_hour/entry_minute to time_entries

Both columns are nullable; rows written before this revision keep only
the decimal hours.

Revision ID: 002
Revises: 001
Create Date: 2024-03-01 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("time_entries") as batch_op:
        batch_op.add_column(sa.Column("entry_hour", sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column("entry_minute", sa.Integer(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("time_entries") as batch_op:
        batch_op.drop_column("entry_minute")
        batch_op.drop_column("entry_hour")
