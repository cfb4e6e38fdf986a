import uuid

from workout_log.schemas.fields import (
    CamelModel,
    NameStr,
    NonNegativeFloat,
    PositiveInt,
    Rpe,
    UtcDatetime,
)

class ExerciseSetCreate(CamelModel):
    exercise_name: NameStr
    reps: PositiveInt
    weight: NonNegativeFloat | None = None
    rpe: Rpe | None = None
    notes: str | None = None

class ExerciseSetRead(CamelModel):
    id: uuid.UUID
    session_id: uuid.UUID
    exercise_name: str
    reps: int
    weight: float | None = None
    rpe: float | None = None
    notes: str | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
