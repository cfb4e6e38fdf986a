"""Response and request shapes as the client sees them.

These are plain data holders: the server has already validated what it
returns, so only wire concerns live here (camelCase names, ISO timestamps
parsed back into aware datetimes, ``defaultExercises`` defaulting to ``[]``).
"""
from typing import Optional

from pydantic import Field, field_validator

from workout_log.schemas.fields import CamelModel, UtcDatetime


class WorkoutExercise(CamelModel):
    name: str
    notes: Optional[str] = None
    target_reps: int
    target_weight: Optional[float] = None
    rest_seconds: int


class Workout(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    default_exercises: list[WorkoutExercise] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime

    @field_validator("default_exercises", mode="before")
    @classmethod
    def missing_is_empty(cls, v):
        return [] if v is None else v


class ExerciseSet(CamelModel):
    id: str
    exercise_name: str
    reps: int
    weight: Optional[float] = None
    rpe: Optional[float] = None
    notes: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class WorkoutSession(CamelModel):
    id: str
    date: UtcDatetime
    notes: Optional[str] = None
    workout_id: str
    workout: Optional[Workout] = None
    exercise_sets: list[ExerciseSet] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime


class WorkoutSummary(Workout):
    sessions: list[WorkoutSession] = Field(default_factory=list)


class ExerciseSetInput(CamelModel):
    exercise_name: str
    reps: int
    weight: Optional[float] = None
    rpe: Optional[float] = None
    notes: Optional[str] = None


class CreateSessionPayload(CamelModel):
    workout_id: str
    date: UtcDatetime
    notes: Optional[str] = None
    exercise_sets: list[ExerciseSetInput]


class UpsertWorkoutPayload(CamelModel):
    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    default_exercises: list[WorkoutExercise]
