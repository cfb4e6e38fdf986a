import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from workout_log.db import get_db
from workout_log.repositories.workout_repo import WorkoutRepository
from workout_log.schemas import WorkoutDetail, WorkoutRead, WorkoutUpsert

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
async def list_workouts(db: AsyncSession = Depends(get_db)):
    return await WorkoutRepository(db).list()

@router.get("/{workout_id}", response_model=WorkoutDetail)
async def get_workout(workout_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    workout = await WorkoutRepository(db).get(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

@router.post(
    "",
    response_model=WorkoutRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"description": "Existing workout updated"},
        404: {"description": "Workout to update not found"},
        409: {"description": "Workout name already exists"},
    },
)
async def upsert_workout(payload: WorkoutUpsert, response: Response, db: AsyncSession = Depends(get_db)):
    repo = WorkoutRepository(db)
    fields = dict(
        name=payload.name,
        description=payload.description,
        default_exercises=payload.exercises_document(),
    )
    if payload.id is None:
        return await repo.create(**fields)

    workout = await repo.update(payload.id, **fields)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    response.status_code = status.HTTP_200_OK
    return workout
