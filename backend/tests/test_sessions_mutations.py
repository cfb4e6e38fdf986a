from fastapi.testclient import TestClient
from workout_log.main import app
from workout_log.settings import Settings, get_settings
import pytest
import uuid

client = TestClient(app)

@pytest.fixture
def mutations_enabled():
    app.dependency_overrides[get_settings] = lambda: Settings(ENABLE_SESSION_MUTATIONS=True)
    yield
    app.dependency_overrides.pop(get_settings, None)

def logged_session():
    w = client.post("/api/workouts", json={
        "name": f"W-{uuid.uuid4().hex[:8]}",
        "defaultExercises": [{"name": "Squat", "targetReps": 5, "restSeconds": 90}],
    }).json()
    r = client.post("/api/sessions", json={
        "workoutId": w["id"],
        "date": "2024-05-01T12:00:00Z",
        "notes": "first pass",
        "exerciseSets": [{"exerciseName": "Squat", "reps": 5}],
    })
    assert r.status_code == 201
    return r.json()

def test_mutations_disabled_by_default():
    s = logged_session()
    assert client.patch(f"/api/sessions/{s['id']}", json={"notes": "x"}).status_code == 404
    assert client.delete(f"/api/sessions/{s['id']}").status_code == 404
    assert client.get(f"/api/sessions/{s['id']}").json()["notes"] == "first pass"

def test_patch_updates_only_sent_fields(mutations_enabled):
    s = logged_session()
    r = client.patch(f"/api/sessions/{s['id']}", json={"notes": "edited"})
    assert r.status_code == 200
    body = r.json()
    assert body["notes"] == "edited"
    assert body["date"] == s["date"]
    assert body["exerciseSets"] == s["exerciseSets"]

def test_patch_moves_date(mutations_enabled):
    s = logged_session()
    r = client.patch(f"/api/sessions/{s['id']}", json={"date": "2024-06-01T07:30:00Z"})
    assert r.status_code == 200
    assert r.json()["date"].startswith("2024-06-01T07:30:00")
    assert r.json()["notes"] == "first pass"

def test_patch_unknown_404(mutations_enabled):
    assert client.patch(f"/api/sessions/{uuid.uuid4()}", json={"notes": "x"}).status_code == 404

def test_delete_removes_session_and_sets(mutations_enabled):
    s = logged_session()
    r = client.delete(f"/api/sessions/{s['id']}")
    assert r.status_code == 204
    assert client.get(f"/api/sessions/{s['id']}").status_code == 404
    assert client.delete(f"/api/sessions/{s['id']}").status_code == 404
