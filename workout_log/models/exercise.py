"""Exercise and WorkoutSet models."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workout_log.db.base import Base


class Exercise(Base):
    """A named movement within one workout. Names are not unique, even per workout."""

    __tablename__ = "exercises"
    __table_args__ = ({"sqlite_autoincrement": True},)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(191), nullable=False)
    workout_id: Mapped[int] = mapped_column(
        "workoutId",
        Integer,
        ForeignKey("workouts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    workout: Mapped["Workout"] = relationship("Workout", back_populates="exercises")
    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutSet.id",
    )


class WorkoutSet(Base):
    """One set: reps at a weight."""

    __tablename__ = "sets"
    __table_args__ = (
        CheckConstraint("reps >= 0", name="ck_sets_reps_non_negative"),
        CheckConstraint("weight >= 0", name="ck_sets_weight_non_negative"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    exercise_id: Mapped[int] = mapped_column(
        "exerciseId",
        Integer,
        ForeignKey("exercises.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="sets")
