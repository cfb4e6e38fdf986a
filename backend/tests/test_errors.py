from fastapi.testclient import TestClient
from workout_log.main import app
from workout_log.repositories.workout_repo import WorkoutRepository

# unhandled errors would otherwise be re-raised into the test
client = TestClient(app, raise_server_exceptions=False)

def test_unhandled_error_500_with_message(monkeypatch, caplog):
    async def boom(self):
        raise RuntimeError("database exploded")
    monkeypatch.setattr(WorkoutRepository, "list", boom)
    r = client.get("/api/workouts")
    assert r.status_code == 500
    assert r.json() == {"message": "database exploded"}
    assert "unhandled error on GET /api/workouts" in caplog.text

def test_validation_body_lists_every_issue():
    r = client.post("/api/sessions", json={"exerciseSets": [{"reps": 0}]})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation failed"
    paths = [tuple(i["path"]) for i in body["issues"]]
    assert ("workoutId",) in paths
    assert ("date",) in paths
    assert ("exerciseSets", 0, "exerciseName") in paths
    assert ("exerciseSets", 0, "reps") in paths
    assert all(i["location"] == "body" and i["code"] and i["message"] for i in body["issues"])

def test_malformed_json_400():
    r = client.post("/api/workouts", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["message"] == "Validation failed"

def test_method_not_allowed_keeps_message_shape():
    r = client.put("/api/workouts")
    assert r.status_code == 405
    assert "message" in r.json()
