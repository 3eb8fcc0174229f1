"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.db.session import get_db
from workout_log.repositories.workouts import WorkoutRepository, parse_workout_id


def get_workout_repository(db: AsyncSession = Depends(get_db)) -> WorkoutRepository:
    return WorkoutRepository(db)


def valid_workout_id(workout_id: str) -> int:
    """Path parameter as a positive integer (400 otherwise, never 422)."""
    return parse_workout_id(workout_id)
