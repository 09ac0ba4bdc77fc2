"""
Scheduling - turn training plan templates into dated workout sessions.
"""
from volleycoach.services.scheduling.generator import (
    DEFAULT_WEEKLY_SCHEDULE,
    SessionDraft,
    generate_sessions,
)
from volleycoach.services.scheduling.template import (
    Exercise,
    Phase,
    WorkoutDay,
    parse_phases,
    template_span_days,
)

__all__ = [
    "DEFAULT_WEEKLY_SCHEDULE",
    "SessionDraft",
    "generate_sessions",
    "Exercise",
    "Phase",
    "WorkoutDay",
    "parse_phases",
    "template_span_days",
]
