"""Workout repository: nested Workout -> Exercise -> Set persistence.

Every mutating call runs in a single transaction on the injected session.
Any SQLAlchemy error rolls it back and surfaces as ``StorageFailure`` with a
generic message; the cause only goes to the log.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from workout_log.core.constants import MAX_STORED_INT
from workout_log.core.dates import as_utc, utcnow
from workout_log.core.errors import InvalidArgument, NotFound, StorageFailure
from workout_log.models import Exercise, Workout, WorkoutSet
from workout_log.schemas.workout import ExerciseUpsert, WorkoutEntry, WorkoutUpdate

logger = logging.getLogger(__name__)

INVALID_WORKOUT_ID = "Invalid workout ID"
INVALID_WORKOUT_DATA = "Invalid workout data"
WORKOUT_NOT_FOUND = "Workout not found"


def parse_workout_id(raw: str) -> int:
    """Accept ASCII digits with a value of at least 1; anything else is InvalidArgument.

    Ids past the storage integer range cannot exist, so they are NotFound.
    """
    if not raw.isascii() or not raw.isdigit() or int(raw) < 1:
        logger.warning("Invalid workout ID received: %r", raw)
        raise InvalidArgument(INVALID_WORKOUT_ID)
    workout_id = int(raw)
    if workout_id > MAX_STORED_INT:
        logger.warning("Workout not found with ID: %s", raw)
        raise NotFound(WORKOUT_NOT_FOUND)
    return workout_id


def _workout_query():
    return select(Workout).options(selectinload(Workout.exercises).selectinload(Exercise.sets))


def _new_exercise(item: ExerciseUpsert) -> Exercise:
    # ids on sets of a new exercise cannot refer to anything; they are ignored
    return Exercise(
        name=item.name,
        sets=[WorkoutSet(reps=s.reps, weight=s.weight) for s in item.sets],
    )


class WorkoutRepository:
    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _storage(self, message: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.exception("%s: %s", message, e)
            await self._session.rollback()
            raise StorageFailure(message) from e

    async def _load(self, workout_id: int) -> Workout | None:
        result = await self._session.execute(
            _workout_query()
            .where(Workout.id == workout_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _require(self, workout_id: int) -> Workout:
        workout = await self._load(workout_id)
        if workout is None:
            logger.warning("Workout not found with ID: %s", workout_id)
            raise NotFound(WORKOUT_NOT_FOUND)
        return workout

    async def list_all(self) -> list[Workout]:
        """All workouts with exercises and sets, most recent first."""
        async with self._storage("Error fetching workouts"):
            result = await self._session.execute(
                _workout_query().order_by(Workout.date.desc(), Workout.id.desc())
            )
            workouts = list(result.scalars().all())
        logger.info("Fetched %d workouts from the database", len(workouts))
        return workouts

    async def get(self, workout_id: int) -> Workout:
        async with self._storage("Error fetching workout"):
            workout = await self._require(workout_id)
        logger.info("Fetched workout with ID: %s", workout.id)
        return workout

    async def create(self, entries: Sequence[WorkoutEntry] | None) -> Workout:
        """Save a workout dated now. Each entry becomes its own exercise holding exactly one set.

        Entries sharing an exercise name are not merged.
        """
        if not entries:
            logger.warning("Invalid workout data received: no entries")
            raise InvalidArgument(INVALID_WORKOUT_DATA)
        workout = Workout(
            date=utcnow(),
            exercises=[
                Exercise(name=entry.exercise, sets=[WorkoutSet(reps=entry.reps, weight=entry.weight)])
                for entry in entries
            ],
        )
        async with self._storage("Error saving workout"):
            self._session.add(workout)
            await self._session.commit()
            saved = await self._require(workout.id)
        logger.info("Workout saved with ID: %s", saved.id)
        return saved

    async def update(self, workout_id: int, changes: WorkoutUpdate) -> Workout:
        """Apply a new date and/or merge exercises by id.

        Known exercise ids are renamed and their sets merged the same way (known set
        ids updated, the rest created). Unknown or missing exercise ids create new
        exercises. Nothing absent from ``changes`` is deleted.
        """
        async with self._storage("Error updating workout"):
            workout = await self._require(workout_id)
            if changes.date is not None:
                workout.date = as_utc(changes.date)
            if changes.exercises is not None:
                existing = {exercise.id: exercise for exercise in workout.exercises}
                for item in changes.exercises:
                    exercise = existing.get(item.id) if item.id is not None else None
                    if exercise is None:
                        workout.exercises.append(_new_exercise(item))
                        continue
                    exercise.name = item.name
                    sets_by_id = {set_.id: set_ for set_ in exercise.sets}
                    for entry in item.sets:
                        set_ = sets_by_id.get(entry.id) if entry.id is not None else None
                        if set_ is None:
                            exercise.sets.append(WorkoutSet(reps=entry.reps, weight=entry.weight))
                        else:
                            set_.reps = entry.reps
                            set_.weight = entry.weight
            await self._session.commit()
            updated = await self._require(workout_id)
        logger.info("Workout updated with ID: %s", updated.id)
        return updated

    async def delete(self, workout_id: int) -> None:
        """Delete a workout; its exercises and sets go with it."""
        async with self._storage("Error deleting workout"):
            workout = await self._require(workout_id)
            await self._session.delete(workout)
            await self._session.commit()
        logger.info("Workout deleted with ID: %s", workout_id)
