import uuid
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from workout_log.schemas.exercise_set import ExerciseSetCreate, ExerciseSetRead
from workout_log.schemas.fields import CamelModel, UtcDatetime
from workout_log.schemas.workout import WorkoutRead

class SessionCreate(CamelModel):
    workout_id: uuid.UUID
    date: UtcDatetime
    notes: str | None = None
    exercise_sets: Annotated[list[ExerciseSetCreate], Field(min_length=1)]

class SessionUpdate(CamelModel):
    """Partial update; only the fields sent are applied."""
    date: UtcDatetime | None = None
    notes: str | None = None

class SessionRead(CamelModel):
    id: uuid.UUID
    workout_id: uuid.UUID
    date: UtcDatetime
    notes: str | None = None
    exercise_sets: list[ExerciseSetRead] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime

class SessionWithWorkout(SessionRead):
    workout: WorkoutRead

class WorkoutDetail(WorkoutRead):
    sessions: list[SessionRead] = Field(default_factory=list)

class SessionListQuery(BaseModel):
    """``GET /sessions`` filter; both bounds are inclusive."""

    from_: UtcDatetime | None = Field(default=None, alias="from")
    to: UtcDatetime | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("from_", "to", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        # repeated query parameters: the first one wins
        if isinstance(v, (list, tuple)):
            v = v[0] if v else None
        if isinstance(v, str):
            v = v.strip() or None
        return v

    @field_validator("to")
    @classmethod
    def range_in_order(cls, v, info: ValidationInfo):
        start = info.data.get("from_")
        if v is not None and start is not None and start > v:
            raise PydanticCustomError(
                "date_range",
                'Query parameter "from" must be earlier than or equal to "to"',
            )
        return v
