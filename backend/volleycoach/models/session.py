"""
Workout Session database model.
"""
import uuid
from datetime import datetime, date
from enum import Enum
from sqlalchemy import String, Date, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column

from volleycoach.core.database import Base
from volleycoach.models.user import _utcnow


class SessionStatus(str, Enum):
    """Lifecycle status of a scheduled session."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    PARTIAL = "partial"
    SKIPPED = "skipped"


class WorkoutSession(Base):
    """A workout scheduled on a single calendar date."""

    __tablename__ = "workout_sessions"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    athlete_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    training_plan_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("training_plans.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    workout_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("workouts.id", ondelete="SET NULL"),
        nullable=True
    )
    scheduled_date: Mapped[date] = mapped_column(Date, index=True, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=SessionStatus.SCHEDULED.value
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    workout_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    workout_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    exercises: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow
    )
