"""Workout CRUD endpoints."""

import logging

from fastapi import APIRouter, Depends

from workout_log.api.deps import get_workout_repository, valid_workout_id
from workout_log.repositories.workouts import WorkoutRepository
from workout_log.schemas.workout import MessageRead, WorkoutCreate, WorkoutRead, WorkoutUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(repo: WorkoutRepository = Depends(get_workout_repository)):
    """All workouts with exercises and sets, most recent first."""
    logger.info("Received request to list workouts")
    workouts = await repo.list_all()
    return [WorkoutRead.model_validate(w) for w in workouts]


@router.post("", response_model=WorkoutRead)
async def create_workout(
    payload: WorkoutCreate,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Save a workout from flat ``{exercise, weight, reps}`` entries."""
    entries = payload.workout.entries if payload.workout else None
    logger.info("Received request to save workout with %d entries", len(entries or []))
    workout = await repo.create(entries)
    return WorkoutRead.model_validate(workout)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_pk: int = Depends(valid_workout_id),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """One workout with its exercises and sets."""
    logger.info("Received request to fetch workout %s", workout_pk)
    workout = await repo.get(workout_pk)
    return WorkoutRead.model_validate(workout)


@router.put("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    payload: WorkoutUpdate,
    workout_pk: int = Depends(valid_workout_id),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Change the date and/or merge exercises and sets by id. Omitted exercises/sets are kept."""
    logger.info("Received request to update workout %s", workout_pk)
    workout = await repo.update(workout_pk, payload)
    return WorkoutRead.model_validate(workout)


@router.delete("/{workout_id}", response_model=MessageRead)
async def delete_workout(
    workout_pk: int = Depends(valid_workout_id),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Delete a workout with its exercises and sets."""
    logger.info("Received request to delete workout %s", workout_pk)
    await repo.delete(workout_pk)
    return MessageRead(message="Workout deleted successfully.")
