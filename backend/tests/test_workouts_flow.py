from fastapi.testclient import TestClient
from workout_log.main import app
import uuid

client = TestClient(app)

def exercise(name="Squat", **extra):
    return {"name": name, "targetReps": 5, "restSeconds": 120, **extra}

def create_workout(name="Full Body", **extra):
    body = {"name": name, "defaultExercises": [exercise()], **extra}
    return client.post("/api/workouts", json=body)

def test_create_workout_201():
    r = create_workout(description="Compound lifts")
    assert r.status_code == 201
    body = r.json()
    uuid.UUID(body["id"])
    assert body["name"] == "Full Body"
    assert body["description"] == "Compound lifts"
    assert body["createdAt"] and body["updatedAt"]

def test_duplicate_name_201_then_409():
    assert create_workout("Push Day").status_code == 201
    r = create_workout("Push Day")
    assert r.status_code == 409
    assert r.json() == {"message": "Workout name already exists"}

def test_update_with_id_200():
    created = create_workout("Legs").json()
    r = client.post("/api/workouts", json={
        "id": created["id"],
        "name": "Leg Day",
        "defaultExercises": [exercise("Lunge", targetWeight=40)],
    })
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == created["id"]
    assert body["name"] == "Leg Day"
    assert body["defaultExercises"][0]["name"] == "Lunge"
    assert body["defaultExercises"][0]["targetWeight"] == 40
    # absent description is stored as null, not left as it was
    assert body["description"] is None

def test_update_to_taken_name_409():
    create_workout("A")
    b = create_workout("B").json()
    r = client.post("/api/workouts", json={"id": b["id"], "name": "A", "defaultExercises": [exercise()]})
    assert r.status_code == 409
    # the failed update left B untouched
    assert client.get(f"/api/workouts/{b['id']}").json()["name"] == "B"

def test_update_unknown_id_404():
    r = client.post("/api/workouts", json={"id": str(uuid.uuid4()), "name": "Ghost", "defaultExercises": [exercise()]})
    assert r.status_code == 404

def test_list_newest_first():
    first = create_workout("First").json()
    second = create_workout("Second").json()
    r = client.get("/api/workouts")
    assert r.status_code == 200
    assert [w["id"] for w in r.json()] == [second["id"], first["id"]]

def test_default_exercises_round_trip():
    created = client.post("/api/workouts", json={
        "name": "Rowing",
        "defaultExercises": [{"name": "Row", "targetReps": 10, "restSeconds": 60}],
    }).json()
    fetched = client.get(f"/api/workouts/{created['id']}").json()
    expected = [{"name": "Row", "notes": None, "targetReps": 10, "targetWeight": None, "restSeconds": 60}]
    assert created["defaultExercises"] == expected
    assert fetched["defaultExercises"] == expected

def test_default_exercises_keep_order():
    names = ["Bench", "Row", "Press", "Curl"]
    created = create_workout("Upper", defaultExercises=[exercise(n) for n in names]).json()
    fetched = client.get(f"/api/workouts/{created['id']}").json()
    assert [e["name"] for e in fetched["defaultExercises"]] == names

def test_detail_includes_sessions_with_sets():
    w = create_workout("Detail").json()
    for day in ("2024-05-01T12:00:00Z", "2024-05-03T12:00:00Z"):
        client.post("/api/sessions", json={
            "workoutId": w["id"],
            "date": day,
            "exerciseSets": [{"exerciseName": "Squat", "reps": 5}, {"exerciseName": "Squat", "reps": 4}],
        })
    body = client.get(f"/api/workouts/{w['id']}").json()
    assert [s["date"][:10] for s in body["sessions"]] == ["2024-05-03", "2024-05-01"]
    assert [st["reps"] for st in body["sessions"][0]["exerciseSets"]] == [5, 4]

def test_get_unknown_workout_404():
    r = client.get(f"/api/workouts/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json() == {"message": "Workout not found"}

def test_get_malformed_id_400():
    r = client.get("/api/workouts/not-an-id")
    assert r.status_code == 400
    issue = r.json()["issues"][0]
    assert issue["location"] == "path"
    assert issue["path"] == ["workout_id"]

def test_blank_name_rejected():
    r = create_workout("   ")
    assert r.status_code == 400
    assert ["name"] in [i["path"] for i in r.json()["issues"]]

def test_empty_default_exercises_rejected():
    r = client.post("/api/workouts", json={"name": "Empty", "defaultExercises": []})
    assert r.status_code == 400
    assert ["defaultExercises"] in [i["path"] for i in r.json()["issues"]]

def test_exercise_rules_reported_per_field():
    r = client.post("/api/workouts", json={
        "name": "Bad",
        "defaultExercises": [{"name": "", "targetReps": 0, "targetWeight": -5, "restSeconds": 1.5}],
    })
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation failed"
    paths = {tuple(i["path"]) for i in body["issues"]}
    assert paths == {
        ("defaultExercises", 0, "name"),
        ("defaultExercises", 0, "targetReps"),
        ("defaultExercises", 0, "targetWeight"),
        ("defaultExercises", 0, "restSeconds"),
    }

def test_padded_names_stored_as_sent():
    r = client.post("/api/workouts", json={"name": "  Pull Day ", "defaultExercises": [exercise(" Row ")]})
    assert r.status_code == 201
    body = client.get(f"/api/workouts/{r.json()['id']}").json()
    assert body["name"] == "  Pull Day "
    assert body["defaultExercises"][0]["name"] == " Row "

def test_numeric_fields_not_coerced():
    for bad in ("40", True):
        r = create_workout(f"Coerce-{bad}", defaultExercises=[exercise(targetWeight=bad)])
        assert r.status_code == 400
        assert ["defaultExercises", 0, "targetWeight"] in [i["path"] for i in r.json()["issues"]]
    assert client.get("/api/workouts").json() == []
