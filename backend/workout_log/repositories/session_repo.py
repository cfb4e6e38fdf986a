from __future__ import annotations
import logging
import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from workout_log.errors import NotFoundError
from workout_log.models import ExerciseSet, WorkoutSession
from workout_log.repositories.base import BaseRepository
from workout_log.repositories.workout_repo import WorkoutRepository

log = logging.getLogger(__name__)

class SessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    def _detail(self):
        return select(WorkoutSession).options(
            selectinload(WorkoutSession.workout),
            selectinload(WorkoutSession.exercise_sets),
        )

    async def get(self, session_id: uuid.UUID) -> Optional[WorkoutSession]:
        stmt = (
            self._detail()
            .where(WorkoutSession.id == session_id)
            .execution_options(populate_existing=True)
        )
        return (await self.db.execute(stmt)).scalar_one_or_none()

    async def list(
        self, *, from_: datetime | None = None, to: datetime | None = None
    ) -> list[WorkoutSession]:
        """Sessions newest first; ``from_``/``to`` are inclusive bounds on ``date``."""
        stmt = self._detail().order_by(WorkoutSession.date.desc())
        if from_ is not None:
            stmt = stmt.where(WorkoutSession.date >= from_)
        if to is not None:
            stmt = stmt.where(WorkoutSession.date <= to)
        return list((await self.db.execute(stmt)).scalars().all())

    async def create(
        self,
        *,
        workout_id: uuid.UUID,
        date: datetime,
        notes: str | None,
        exercise_sets: list[dict[str, Any]],
    ) -> WorkoutSession:
        """Insert the session and all of its sets in one transaction."""
        if not await WorkoutRepository(self.db).exists(workout_id):
            raise NotFoundError("Workout not found")

        sess = WorkoutSession(
            workout_id=workout_id,
            date=date,
            notes=notes,
            exercise_sets=[
                ExerciseSet(position=position, **fields)
                for position, fields in enumerate(exercise_sets)
            ],
        )
        self.db.add(sess)
        await self.commit()
        log.info("session %s logged with %d sets", sess.id, len(exercise_sets))
        return await self.get(sess.id)

    async def update(self, session_id: uuid.UUID, **changes: Any) -> Optional[WorkoutSession]:
        sess = await self.db.get(WorkoutSession, session_id)
        if not sess:
            return None
        for field, value in changes.items():
            setattr(sess, field, value)
        await self.commit()
        return await self.get(session_id)

    async def delete(self, session_id: uuid.UUID) -> bool:
        sess = await self.get(session_id)
        if not sess:
            return False
        await self.db.delete(sess)
        await self.commit()
        return True
