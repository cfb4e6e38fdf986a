# workout_log/repositories/base.py
from __future__ import annotations
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 async style."""
    model: type[T]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def commit(self) -> None:
        """Commit the unit of work; roll back and re-raise on any failure."""
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        await self.commit()
        await self.db.refresh(entity)
        return entity
