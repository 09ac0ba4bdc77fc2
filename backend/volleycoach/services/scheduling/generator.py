"""
Session Schedule Generator.

Expands a training plan into dated workout session drafts:

- Without a usable template, the default weekly pattern is applied
  to every day of the range.
- With a template, each week anchor (start, start+7, ...) walks every
  workout day in template order and schedules it on the next
  occurrence of its weekday. Dates past the range end are dropped.

Pure computation: no I/O, no shared state.
"""
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from volleycoach.core.logging import get_logger
from volleycoach.models.session import SessionStatus
from volleycoach.services.scheduling.dates import (
    FRIDAY,
    MONDAY,
    TUESDAY,
    WEDNESDAY,
    DateLike,
    day_of_week,
    format_date,
    iter_days,
    iter_week_anchors,
    next_weekday,
    to_calendar_date,
)
from volleycoach.services.scheduling.template import (
    Phase,
    WorkoutDay,
    flatten_workout_days,
    parse_phases,
)

logger = get_logger(__name__)

DEFAULT_WEEKLY_SCHEDULE: Tuple[Tuple[int, str], ...] = (
    (MONDAY, "Strength Training - Lower Body Focus"),
    (TUESDAY, "Plyometric Training - Vertical Power"),
    (WEDNESDAY, "Technique & Skills - Court Practice"),
    (FRIDAY, "Strength Training - Upper Body & Core"),
)


@dataclass
class SessionDraft:
    """A workout session ready to be persisted (no id or timestamps yet)."""
    athlete_id: str
    training_plan_id: str
    scheduled_date: str
    workout_summary: Optional[str] = None
    workout_title: Optional[str] = None
    exercises: Optional[List[Dict[str, Any]]] = None
    status: str = SessionStatus.SCHEDULED.value
    workout_id: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "athlete_id": self.athlete_id,
            "training_plan_id": self.training_plan_id,
            "workout_id": self.workout_id,
            "scheduled_date": self.scheduled_date,
            "status": self.status,
            "notes": self.notes,
            "workout_summary": self.workout_summary,
            "workout_title": self.workout_title,
            "exercises": copy.deepcopy(self.exercises),
        }


def generate_sessions(
    plan_id: str,
    athlete_id: str,
    start_date: DateLike,
    end_date: DateLike,
    phases: Optional[Iterable[Union[Phase, Dict[str, Any]]]] = None,
) -> List[SessionDraft]:
    """
    Generate session drafts for a plan over [start_date, end_date].

    Args:
        plan_id: Owning training plan id
        athlete_id: Athlete the sessions belong to
        start_date: First day of the range (date, datetime or ISO string)
        end_date: Last day of the range, inclusive
        phases: Optional template phases (Phase objects or dicts)

    Returns:
        Session drafts in generation order. Empty if start_date > end_date.
    """
    start = to_calendar_date(start_date)
    end = to_calendar_date(end_date)
    if start > end:
        return []

    workout_days = flatten_workout_days(parse_phases(phases))

    if workout_days:
        drafts = _template_schedule(plan_id, athlete_id, start, end, workout_days)
        source = "template"
    else:
        drafts = _default_schedule(plan_id, athlete_id, start, end)
        source = "default"

    logger.debug(
        "Generated workout sessions",
        plan_id=plan_id,
        source=source,
        start_date=format_date(start),
        end_date=format_date(end),
        count=len(drafts),
    )
    return drafts


def _default_schedule(plan_id, athlete_id, start, end) -> List[SessionDraft]:
    schedule = dict(DEFAULT_WEEKLY_SCHEDULE)
    drafts = []
    for day in iter_days(start, end):
        summary = schedule.get(day_of_week(day))
        if summary is None:
            continue
        drafts.append(SessionDraft(
            athlete_id=athlete_id,
            training_plan_id=plan_id,
            scheduled_date=format_date(day),
            workout_summary=summary,
            workout_title=summary,
        ))
    return drafts


def _template_schedule(
    plan_id: str,
    athlete_id: str,
    start,
    end,
    workout_days: List[WorkoutDay],
) -> List[SessionDraft]:
    drafts = []
    for anchor in iter_week_anchors(start, end):
        for workout_day in workout_days:
            when = next_weekday(anchor, workout_day.day)
            if not start <= when <= end:
                continue
            drafts.append(SessionDraft(
                athlete_id=athlete_id,
                training_plan_id=plan_id,
                scheduled_date=format_date(when),
                workout_summary=workout_day.title,
                workout_title=workout_day.title,
                exercises=[ex.to_dict() for ex in workout_day.exercises],
            ))
    return drafts
