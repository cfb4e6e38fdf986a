# workout_log/repositories/workout_repo.py
from __future__ import annotations
import logging
import uuid
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from workout_log.errors import ConflictError
from workout_log.models import Workout, WorkoutSession
from workout_log.repositories.base import BaseRepository

log = logging.getLogger(__name__)

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    async def list(self) -> list[Workout]:
        stmt = select(Workout).order_by(Workout.created_at.desc())
        return list((await self.db.execute(stmt)).scalars().all())

    async def get(self, workout_id: uuid.UUID) -> Optional[Workout]:
        """Workout with its sessions (newest first), each with its sets."""
        stmt = (
            select(Workout)
            .where(Workout.id == workout_id)
            .options(selectinload(Workout.sessions).selectinload(WorkoutSession.exercise_sets))
            .execution_options(populate_existing=True)
        )
        return (await self.db.execute(stmt)).scalar_one_or_none()

    async def exists(self, workout_id: uuid.UUID) -> bool:
        stmt = select(Workout.id).where(Workout.id == workout_id)
        return (await self.db.execute(stmt)).scalar_one_or_none() is not None

    # WRITES
    async def create(
        self, *, name: str, description: str | None, default_exercises: list[dict[str, Any]]
    ) -> Workout:
        workout = Workout(name=name, description=description, default_exercises=default_exercises)
        return await self._save(workout)

    async def update(
        self,
        workout_id: uuid.UUID,
        *,
        name: str,
        description: str | None,
        default_exercises: list[dict[str, Any]],
    ) -> Optional[Workout]:
        workout = await self.db.get(Workout, workout_id)
        if not workout:
            return None
        workout.name = name
        workout.description = description
        workout.default_exercises = default_exercises
        return await self._save(workout)

    async def _save(self, workout: Workout) -> Workout:
        name = workout.name
        try:
            return await self.add_and_refresh(workout)
        except IntegrityError as e:
            # add_and_refresh already rolled back
            log.info("workout name conflict: %r", name)
            raise ConflictError("Workout name already exists") from e
