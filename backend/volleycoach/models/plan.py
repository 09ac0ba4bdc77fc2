"""
Training Plan database model.
"""
import uuid
from datetime import datetime, date
from enum import Enum
from sqlalchemy import String, Date, DateTime, Boolean, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from volleycoach.core.database import Base
from volleycoach.models.user import _utcnow


class PhaseType(str, Enum):
    """Season phase a plan belongs to."""
    OFF_SEASON = "Off-Season"
    PRE_SEASON = "Pre-Season"
    COMPETITION = "Competition"
    RECOVERY = "Recovery"


class TrainingPlan(Base):
    """Training plan stored in database."""

    __tablename__ = "training_plans"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    athlete_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    phase_type: Mapped[str] = mapped_column(String(32), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    template_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Phase/workout-day template used to generate sessions
    phases: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow
    )
