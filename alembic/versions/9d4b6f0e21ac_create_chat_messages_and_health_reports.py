"""create chat_messages and health_reports tables

Revision ID: 9d4b6f0e21ac
Revises: 5c1e8a2f7b34
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9d4b6f0e21ac"
down_revision: str | Sequence[str] | None = "5c1e8a2f7b34"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create chat_messages and health_reports tables."""
    op.create_table(
        "chat_messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("sender", sa.String(20), nullable=False),
        sa.Column("timestamp", sa.String(64), nullable=False),
        sa.Column("response", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_chat_messages_user_id"),
        "chat_messages",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        "ix_chat_messages_user_id_timestamp",
        "chat_messages",
        ["user_id", "timestamp"],
        unique=False,
    )

    op.create_table(
        "health_reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.String(64), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_health_reports_user_id"),
        "health_reports",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        "ix_health_reports_user_id_updated_at",
        "health_reports",
        ["user_id", "updated_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop chat_messages and health_reports tables."""
    op.drop_index("ix_health_reports_user_id_updated_at", table_name="health_reports")
    op.drop_index(op.f("ix_health_reports_user_id"), table_name="health_reports")
    op.drop_table("health_reports")
    op.drop_index("ix_chat_messages_user_id_timestamp", table_name="chat_messages")
    op.drop_index(op.f("ix_chat_messages_user_id"), table_name="chat_messages")
    op.drop_table("chat_messages")
