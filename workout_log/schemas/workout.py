"""Workout, Exercise and Set schemas (wire shapes)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from workout_log.core.constants import MAX_STORED_INT
from workout_log.core.dates import to_iso


# --- create: flat entries, one exercise + one set each ---


class WorkoutEntry(BaseModel):
    exercise: str = Field(..., min_length=1, max_length=191)
    weight: float = Field(..., ge=0, allow_inf_nan=False)
    reps: int = Field(..., ge=0, le=MAX_STORED_INT)


class WorkoutEntries(BaseModel):
    entries: list[WorkoutEntry] | None = None


class WorkoutCreate(BaseModel):
    """POST body: ``{"workout": {"entries": [...]}}``. Missing/empty entries are rejected by the repository."""

    workout: WorkoutEntries | None = None


# --- update: merge by id ---


class SetUpsert(BaseModel):
    id: int | None = None
    reps: int = Field(..., ge=0, le=MAX_STORED_INT)
    weight: float = Field(..., ge=0, allow_inf_nan=False)


class ExerciseUpsert(BaseModel):
    id: int | None = None
    name: str = Field(..., min_length=1, max_length=191)
    sets: list[SetUpsert] = []


class WorkoutUpdate(BaseModel):
    date: datetime | None = None
    exercises: list[ExerciseUpsert] | None = None


# --- read ---


class SetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    reps: int
    weight: float


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    sets: list[SetRead] = []


class WorkoutRead(BaseModel):
    """Workout with nested exercises and sets; ``date`` goes out as an ISO-8601 UTC string."""

    model_config = ConfigDict(from_attributes=True)
    id: int
    date: datetime
    exercises: list[ExerciseRead] = []

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        return to_iso(value)


class MessageRead(BaseModel):
    message: str
