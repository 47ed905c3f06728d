"""Create the clients table.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("client_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("username", sa.Text, nullable=False),
        sa.Column("pwd", sa.Text, nullable=False),
        sa.Column("birth_date", sa.Date, nullable=False),
    )
    # search_by orders every page on username
    op.create_index("ix_clients_username", "clients", ["username"])


def downgrade() -> None:
    op.drop_index("ix_clients_username", table_name="clients")
    op.drop_table("clients")
