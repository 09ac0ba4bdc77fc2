from volleycoach.models.user import User
from volleycoach.models.workout import Workout, WorkoutType
from volleycoach.models.plan import TrainingPlan, PhaseType
from volleycoach.models.session import WorkoutSession, SessionStatus

__all__ = [
    "User",
    "Workout",
    "WorkoutType",
    "TrainingPlan",
    "PhaseType",
    "WorkoutSession",
    "SessionStatus",
]
