import uuid
from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from workout_log.db import Base, utcnow

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    workout = relationship("Workout", back_populates="sessions")
    exercise_sets = relationship(
        "ExerciseSet",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="[ExerciseSet.created_at, ExerciseSet.position]",
    )
