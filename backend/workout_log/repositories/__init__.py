from workout_log.repositories.session_repo import SessionRepository
from workout_log.repositories.workout_repo import WorkoutRepository

__all__ = ["SessionRepository", "WorkoutRepository"]
