from workout_log.schemas.exercise_set import ExerciseSetCreate, ExerciseSetRead
from workout_log.schemas.session import (
    SessionCreate,
    SessionListQuery,
    SessionRead,
    SessionUpdate,
    SessionWithWorkout,
    WorkoutDetail,
)
from workout_log.schemas.workout import WorkoutExercise, WorkoutRead, WorkoutUpsert

__all__ = [
    "ExerciseSetCreate",
    "ExerciseSetRead",
    "SessionCreate",
    "SessionListQuery",
    "SessionRead",
    "SessionUpdate",
    "SessionWithWorkout",
    "WorkoutDetail",
    "WorkoutExercise",
    "WorkoutRead",
    "WorkoutUpsert",
]
