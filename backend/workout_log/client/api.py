"""Typed HTTP wrappers around the workout log API."""
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from workout_log.client.types import (
    CreateSessionPayload,
    UpsertWorkoutPayload,
    Workout,
    WorkoutSession,
    WorkoutSummary,
)
from workout_log.schemas.fields import as_utc


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str, issues: Optional[List[Dict[str, Any]]] = None):
        self.status_code = status_code
        self.message = message
        self.issues = issues or []
        super().__init__(f"{status_code}: {message}")


def to_wire_date(value: datetime) -> str:
    """ISO-8601 in UTC, the form the server parses for every date field."""
    return as_utc(value).isoformat().replace("+00:00", "Z")


class WorkoutLogClient:
    """
    Client for the workout log endpoints.

    Pass ``http`` to reuse an existing httpx.Client (for example FastAPI's
    TestClient); otherwise one is created for ``base_url`` and closed with
    the client.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5174",
        *,
        prefix: str = "/api",
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.prefix = prefix.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "WorkoutLogClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        response = self._http.request(
            method,
            f"{self.prefix}{endpoint}",
            params=params,
            json=json_data,
        )
        if response.is_success:
            return response.json() if response.content else None

        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {}
        message = error_data.get("message") or response.text or f"HTTP {response.status_code}"
        raise ApiError(response.status_code, message, error_data.get("issues"))

    # Workouts

    def fetch_workouts(self) -> List[Workout]:
        return [Workout.model_validate(w) for w in self._request("GET", "/workouts")]

    def fetch_workout(self, workout_id: str) -> WorkoutSummary:
        return WorkoutSummary.model_validate(self._request("GET", f"/workouts/{workout_id}"))

    def upsert_workout(self, payload: UpsertWorkoutPayload) -> Workout:
        body = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        return Workout.model_validate(self._request("POST", "/workouts", json_data=body))

    # Sessions

    def fetch_sessions(
        self, from_: Optional[datetime] = None, to: Optional[datetime] = None
    ) -> List[WorkoutSession]:
        params = {}
        if from_ is not None:
            params["from"] = to_wire_date(from_)
        if to is not None:
            params["to"] = to_wire_date(to)
        data = self._request("GET", "/sessions", params=params or None)
        return [WorkoutSession.model_validate(s) for s in data]

    def fetch_session(self, session_id: str) -> WorkoutSession:
        return WorkoutSession.model_validate(self._request("GET", f"/sessions/{session_id}"))

    def create_session(self, payload: CreateSessionPayload) -> WorkoutSession:
        body = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        body["date"] = to_wire_date(payload.date)
        return WorkoutSession.model_validate(self._request("POST", "/sessions", json_data=body))
