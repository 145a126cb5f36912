"""Initial tables: users, scenarios, steps, point_transactions.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "scenarios",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("author_id", sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_scenarios_author_id"), "scenarios", ["author_id"], unique=False)
    op.create_index(op.f("ix_scenarios_created_at"), "scenarios", ["created_at"], unique=False)

    op.create_table(
        "steps",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("scenario_id", sa.String(36), nullable=False),
        sa.ForeignKeyConstraint(["scenario_id"], ["scenarios.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_steps_scenario_id"), "steps", ["scenario_id"], unique=False)

    op.create_table(
        "point_transactions",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_point_transactions_user_id"), "point_transactions", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_point_transactions_user_id"), table_name="point_transactions")
    op.drop_table("point_transactions")
    op.drop_index(op.f("ix_steps_scenario_id"), table_name="steps")
    op.drop_table("steps")
    op.drop_index(op.f("ix_scenarios_created_at"), table_name="scenarios")
    op.drop_index(op.f("ix_scenarios_author_id"), table_name="scenarios")
    op.drop_table("scenarios")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
