import uuid
from typing import Annotated

from pydantic import Field

from workout_log.schemas.fields import (
    CamelModel,
    NameStr,
    NonNegativeFloat,
    NonNegativeInt,
    PositiveInt,
    UtcDatetime,
)

class WorkoutExercise(CamelModel):
    name: NameStr
    notes: str | None = None
    target_reps: PositiveInt
    target_weight: NonNegativeFloat | None = None
    rest_seconds: NonNegativeInt

class WorkoutUpsert(CamelModel):
    # present -> update that workout, absent -> create a new one
    id: uuid.UUID | None = None
    name: NameStr
    description: str | None = None
    default_exercises: Annotated[list[WorkoutExercise], Field(min_length=1)]

    def exercises_document(self) -> list[dict]:
        """The JSON document stored in ``workouts.default_exercises``."""
        return [e.model_dump(mode="json", by_alias=True) for e in self.default_exercises]

class WorkoutRead(CamelModel):
    id: uuid.UUID
    name: str
    description: str | None = None
    default_exercises: list[WorkoutExercise] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime
