"""
Workout database model.
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import String, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from volleycoach.core.database import Base
from volleycoach.models.user import _utcnow


class WorkoutType(str, Enum):
    """Kinds of workouts an athlete can log."""
    COURT_PRACTICE = "Court Practice/Skills"
    PLYOMETRICS = "Plyometrics"
    AGILITY = "Agility"
    STRENGTH = "Strength"
    CONDITIONING = "Conditioning"
    REST = "Rest"
    OTHER = "Other"


class Workout(Base):
    """Workout definition owned by an athlete."""

    __tablename__ = "workouts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    athlete_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    intensity_rpe: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow
    )
