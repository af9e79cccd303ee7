"""Initial schema: users, templates, clients, client workouts, messages, metrics.

Revision ID: 001
Revises:
Create Date: 2025-11-07

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
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("language", sa.String(length=10), nullable=False, server_default="en"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "workout_templates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_workout_templates_user_created", "workout_templates", ["user_id", "created_at"], unique=False
    )

    op.create_table(
        "template_exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("template_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_group", sa.String(length=100), nullable=False),
        sa.Column("difficulty_level", sa.String(length=50), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["template_id"], ["workout_templates.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_template_exercises_template_id"), "template_exercises", ["template_id"], unique=False)

    op.create_table(
        "template_sets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("weight", sa.Float(), nullable=False, server_default="0"),
        sa.Column("reps", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["exercise_id"], ["template_exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_template_sets_exercise_id"), "template_sets", ["exercise_id"], unique=False)

    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_user_created", "clients", ["user_id", "created_at"], unique=False)

    op.create_table(
        "client_workouts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("template_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["template_id"], ["workout_templates.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_client_workouts_client_id"), "client_workouts", ["client_id"], unique=False)
    op.create_index(op.f("ix_client_workouts_template_id"), "client_workouts", ["template_id"], unique=False)

    op.create_table(
        "client_exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_workout_id", sa.Integer(), nullable=False),
        sa.Column("template_exercise_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_group", sa.String(length=100), nullable=False),
        sa.Column("difficulty_level", sa.String(length=50), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["client_workout_id"], ["client_workouts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["template_exercise_id"], ["template_exercises.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_client_exercises_client_workout_id"), "client_exercises", ["client_workout_id"], unique=False
    )

    op.create_table(
        "client_sets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_exercise_id", sa.Integer(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("weight", sa.Float(), nullable=False, server_default="0"),
        sa.Column("reps", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["client_exercise_id"], ["client_exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_client_sets_client_exercise_id"), "client_sets", ["client_exercise_id"], unique=False)

    op.create_table(
        "client_messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_client_messages_client_created", "client_messages", ["client_id", "created_at"], unique=False
    )

    op.create_table(
        "client_metrics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=True),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_client_metrics_client_recorded", "client_metrics", ["client_id", "recorded_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_client_metrics_client_recorded", table_name="client_metrics")
    op.drop_table("client_metrics")
    op.drop_index("ix_client_messages_client_created", table_name="client_messages")
    op.drop_table("client_messages")
    op.drop_index(op.f("ix_client_sets_client_exercise_id"), table_name="client_sets")
    op.drop_table("client_sets")
    op.drop_index(op.f("ix_client_exercises_client_workout_id"), table_name="client_exercises")
    op.drop_table("client_exercises")
    op.drop_index(op.f("ix_client_workouts_template_id"), table_name="client_workouts")
    op.drop_index(op.f("ix_client_workouts_client_id"), table_name="client_workouts")
    op.drop_table("client_workouts")
    op.drop_index("ix_clients_user_created", table_name="clients")
    op.drop_table("clients")
    op.drop_index(op.f("ix_template_sets_exercise_id"), table_name="template_sets")
    op.drop_table("template_sets")
    op.drop_index(op.f("ix_template_exercises_template_id"), table_name="template_exercises")
    op.drop_table("template_exercises")
    op.drop_index("ix_workout_templates_user_created", table_name="workout_templates")
    op.drop_table("workout_templates")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
