"""ORM models - import all so Base.metadata is complete for migrations."""

from workout_log.models.exercise import Exercise, WorkoutSet
from workout_log.models.workout import Workout

__all__ = [
    "Exercise",
    "Workout",
    "WorkoutSet",
]
