"""Initial schema: workouts, exercises, sets.

Revision ID: 001
Revises:
Create Date: 2026-10-18

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
        "workouts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_workouts_date", "workouts", ["date"], unique=False)

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=191), nullable=False),
        sa.Column("workoutId", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["workoutId"], ["workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_exercises_workoutId"), "exercises", ["workoutId"], unique=False)

    op.create_table(
        "sets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("exerciseId", sa.Integer(), nullable=False),
        sa.CheckConstraint("reps >= 0", name="ck_sets_reps_non_negative"),
        sa.CheckConstraint("weight >= 0", name="ck_sets_weight_non_negative"),
        sa.ForeignKeyConstraint(["exerciseId"], ["exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_sets_exerciseId"), "sets", ["exerciseId"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_sets_exerciseId"), table_name="sets")
    op.drop_table("sets")
    op.drop_index(op.f("ix_exercises_workoutId"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_workouts_date", table_name="workouts")
    op.drop_table("workouts")
