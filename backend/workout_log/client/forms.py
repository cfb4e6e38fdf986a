"""Client-side form state.

The forms validate with the same constrained types as the API schemas
(``workout_log.schemas.fields``) so a user gets the server's verdict before
anything is sent. The server still validates every request on its own.
"""
import uuid
from datetime import date, datetime, time
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from workout_log.client.types import (
    CreateSessionPayload,
    ExerciseSetInput,
    UpsertWorkoutPayload,
    Workout,
    WorkoutExercise,
)
from workout_log.schemas.fields import (
    CamelModel,
    NameStr,
    NonNegativeFloat,
    NonNegativeInt,
    PositiveInt,
    Rpe,
    UtcDatetime,
)

DEFAULT_REPS = 8


def _clean(text: Optional[str]) -> Optional[str]:
    """Blank notes are sent as missing."""
    if text is None:
        return None
    return text.strip() or None


class WorkoutExerciseForm(CamelModel):
    name: NameStr
    notes: Optional[str] = None
    target_reps: PositiveInt
    target_weight: Optional[NonNegativeFloat] = None
    rest_seconds: NonNegativeInt

    @classmethod
    def empty(cls) -> "WorkoutExerciseForm":
        # model_construct: a blank row is not valid yet, it is what the user fills in
        return cls.model_construct(name="", notes="", target_reps=10, target_weight=None, rest_seconds=60)


class WorkoutForm(CamelModel):
    id: Optional[uuid.UUID] = None
    name: NameStr
    description: Optional[str] = None
    default_exercises: Annotated[list[WorkoutExerciseForm], Field(min_length=1)]

    @classmethod
    def from_workout(cls, workout: Workout) -> "WorkoutForm":
        """Edit form for an existing workout."""
        return cls(
            id=workout.id,
            name=workout.name,
            description=workout.description or "",
            default_exercises=[
                WorkoutExerciseForm.model_validate(e.model_dump()) for e in workout.default_exercises
            ],
        )

    def to_payload(self) -> UpsertWorkoutPayload:
        return UpsertWorkoutPayload(
            id=str(self.id) if self.id else None,
            name=self.name,
            description=_clean(self.description),
            default_exercises=[
                WorkoutExercise(
                    name=e.name,
                    notes=_clean(e.notes),
                    target_reps=e.target_reps,
                    target_weight=e.target_weight,
                    rest_seconds=e.rest_seconds,
                )
                for e in self.default_exercises
            ],
        )


class ExerciseSetForm(CamelModel):
    exercise_name: NameStr
    reps: PositiveInt
    weight: Optional[NonNegativeFloat] = None
    rpe: Optional[Rpe] = None
    notes: Optional[str] = None

    @classmethod
    def empty(cls) -> "ExerciseSetForm":
        return cls.model_construct(exercise_name="", reps=DEFAULT_REPS, weight=None, rpe=None, notes="")


class StartSessionForm(CamelModel):
    workout_id: uuid.UUID
    date: UtcDatetime
    notes: Optional[str] = None
    exercise_sets: Annotated[list[ExerciseSetForm], Field(min_length=1)]

    @classmethod
    def from_workout(cls, workout: Workout, when: Optional[datetime] = None) -> "StartSessionForm":
        """Prefill one set per default exercise of ``workout``; RPE is left for the user."""
        sets = [
            ExerciseSetForm.model_construct(
                exercise_name=e.name,
                reps=e.target_reps,
                weight=e.target_weight,
                rpe=None,
                notes=e.notes or "",
            )
            for e in workout.default_exercises
        ] or [ExerciseSetForm.empty()]
        return cls.model_construct(
            workout_id=uuid.UUID(workout.id),
            date=when or datetime.now().astimezone(),
            notes="",
            exercise_sets=sets,
        )

    def to_payload(self) -> CreateSessionPayload:
        return CreateSessionPayload(
            workout_id=str(self.workout_id),
            date=self.date,
            notes=_clean(self.notes),
            exercise_sets=[
                ExerciseSetInput(
                    exercise_name=s.exercise_name,
                    reps=s.reps,
                    weight=s.weight,
                    rpe=s.rpe,
                    notes=_clean(s.notes),
                )
                for s in self.exercise_sets
            ],
        )


class HistoryFilters(BaseModel):
    """Day-granular history filter in local time; ``to_day`` includes the whole day."""

    from_day: Optional[date] = None
    to_day: Optional[date] = None

    def bounds(self) -> tuple[Optional[datetime], Optional[datetime]]:
        start = datetime.combine(self.from_day, time.min).astimezone() if self.from_day else None
        end = datetime.combine(self.to_day, time(23, 59, 59)).astimezone() if self.to_day else None
        return start, end
