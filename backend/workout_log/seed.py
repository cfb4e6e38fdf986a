"""Reset the database to the sample workouts and sessions.

Run: python -m workout_log.seed
"""
import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.db import SessionLocal
from workout_log.models import ExerciseSet, Workout, WorkoutSession
from workout_log.repositories import SessionRepository, WorkoutRepository
from workout_log.schemas import WorkoutExercise

log = logging.getLogger(__name__)

FULL_BODY_EXERCISES = [
    {"name": "Back Squat", "notes": "Keep chest up, drive through heels.",
     "targetReps": 5, "targetWeight": 225, "restSeconds": 180},
    {"name": "Bench Press", "notes": "Squeeze shoulder blades together.",
     "targetReps": 5, "targetWeight": 185, "restSeconds": 150},
    {"name": "Deadlift", "notes": "Neutral spine, hinge at hips.",
     "targetReps": 5, "targetWeight": 275, "restSeconds": 210},
]

UPPER_BODY_EXERCISES = [
    {"name": "Incline Dumbbell Press", "notes": "Slow eccentric, full ROM.",
     "targetReps": 12, "targetWeight": 55, "restSeconds": 90},
    {"name": "Lat Pulldown", "notes": "Pause at chest.",
     "targetReps": 12, "targetWeight": 140, "restSeconds": 75},
    {"name": "Cable Lateral Raise", "notes": "Control the negative.",
     "targetReps": 15, "targetWeight": 20, "restSeconds": 60},
]


def _document(exercises: list[dict]) -> list[dict]:
    return [WorkoutExercise.model_validate(e).model_dump(mode="json", by_alias=True) for e in exercises]


async def seed(db: AsyncSession) -> None:
    for model in (ExerciseSet, WorkoutSession, Workout):
        await db.execute(delete(model))
    await db.commit()

    workouts = WorkoutRepository(db)
    sessions = SessionRepository(db)

    full_body = await workouts.create(
        name="Full Body Strength",
        description="Compound lifts targeting the whole body.",
        default_exercises=_document(FULL_BODY_EXERCISES),
    )
    upper_body = await workouts.create(
        name="Upper Body Pump",
        description="Higher-volume push/pull work.",
        default_exercises=_document(UPPER_BODY_EXERCISES),
    )

    await sessions.create(
        workout_id=full_body.id,
        date=datetime(2024, 5, 1, 12, tzinfo=timezone.utc),
        notes="Strong session, focus on breathing between sets.",
        exercise_sets=[
            {"exercise_name": "Back Squat", "reps": 5, "weight": 225, "rpe": 8,
             "notes": "Last rep grindy."},
            {"exercise_name": "Bench Press", "reps": 5, "weight": 185, "rpe": 7.5},
            {"exercise_name": "Deadlift", "reps": 5, "weight": 275, "rpe": 8.5,
             "notes": "Hook grip held up well."},
        ],
    )
    await sessions.create(
        workout_id=upper_body.id,
        date=datetime(2024, 5, 3, 12, tzinfo=timezone.utc),
        notes="Higher reps felt smooth; try heavier pulldowns next time.",
        exercise_sets=[
            {"exercise_name": "Incline Dumbbell Press", "reps": 12, "weight": 55, "rpe": 7},
            {"exercise_name": "Lat Pulldown", "reps": 12, "weight": 140, "rpe": 6.5},
            {"exercise_name": "Cable Lateral Raise", "reps": 15, "weight": 20, "rpe": 8,
             "notes": "Burning by the end."},
        ],
    )
    log.info("seeded 2 workouts and 2 sessions")


async def main() -> None:
    async with SessionLocal() as db:
        await seed(db)


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(main())
    except Exception:
        log.exception("Seed failed")
        raise SystemExit(1)


if __name__ == "__main__":
    run()
