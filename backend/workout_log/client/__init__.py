"""Client data layer: typed API wrappers, form state and display helpers."""
from workout_log.client.api import ApiError, WorkoutLogClient
from workout_log.client.forms import HistoryFilters, StartSessionForm, WorkoutForm

__all__ = ["ApiError", "HistoryFilters", "StartSessionForm", "WorkoutForm", "WorkoutLogClient"]
