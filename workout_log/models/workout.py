"""Workout model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workout_log.core.dates import utcnow
from workout_log.db.base import Base


class Workout(Base):
    """A single logged session. Owns its exercises; deleting it deletes them."""

    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_date", "date"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Exercise.id",
    )
