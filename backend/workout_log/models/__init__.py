from workout_log.models.workout import Workout
from workout_log.models.session import WorkoutSession
from workout_log.models.exercise_set import ExerciseSet

__all__ = ["Workout", "WorkoutSession", "ExerciseSet"]
