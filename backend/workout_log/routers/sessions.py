import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from workout_log.db import get_db
from workout_log.deps.validation import require_session_mutations, validate_query
from workout_log.repositories.session_repo import SessionRepository
from workout_log.schemas import SessionCreate, SessionListQuery, SessionUpdate, SessionWithWorkout

router = APIRouter(prefix="/sessions", tags=["sessions"])

@router.get("", response_model=list[SessionWithWorkout])
async def list_sessions(
    filters: SessionListQuery = Depends(validate_query(SessionListQuery)),
    db: AsyncSession = Depends(get_db),
):
    return await SessionRepository(db).list(from_=filters.from_, to=filters.to)

@router.get("/{session_id}", response_model=SessionWithWorkout)
async def get_session(session_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    sess = await SessionRepository(db).get(session_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.post(
    "",
    response_model=SessionWithWorkout,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Referenced workout not found"}},
)
async def create_session(payload: SessionCreate, db: AsyncSession = Depends(get_db)):
    return await SessionRepository(db).create(
        workout_id=payload.workout_id,
        date=payload.date,
        notes=payload.notes,
        exercise_sets=[s.model_dump() for s in payload.exercise_sets],
    )

# Optional extensions; disabled unless ENABLE_SESSION_MUTATIONS is set.

@router.patch(
    "/{session_id}",
    response_model=SessionWithWorkout,
    dependencies=[Depends(require_session_mutations)],
)
async def update_session(session_id: uuid.UUID, payload: SessionUpdate, db: AsyncSession = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("date", ...) is None:
        changes.pop("date")  # a session always keeps a date
    sess = await SessionRepository(db).update(session_id, **changes)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_session_mutations)],
)
async def delete_session(session_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    if not await SessionRepository(db).delete(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
