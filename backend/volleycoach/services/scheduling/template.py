"""
Training plan templates: phases of workout days.

Templates arrive as JSON (request bodies, stored plan rows, the
built-in catalog). Parsing is lenient: anything the generator can't
schedule is kept as-is and later skipped rather than rejected here.
"""
import copy
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

DEFAULT_PHASE_WEEKS = 2

_NUMBER = re.compile(r"\d+")


@dataclass
class Exercise:
    """One exercise inside a workout day."""
    name: str
    focus: str = ""
    sets: Optional[int] = None
    reps: Optional[Union[int, str]] = None
    notes: Optional[str] = None
    # The dict this exercise was parsed from, as authored
    source: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Exercise":
        return cls(
            name=str(data.get("name") or ""),
            focus=str(data.get("focus") or ""),
            sets=data.get("sets"),
            reps=data.get("reps"),
            notes=data.get("notes"),
            source=copy.deepcopy(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """The exercise as authored when parsed, otherwise built from its fields."""
        if self.source is not None:
            return copy.deepcopy(self.source)
        data: Dict[str, Any] = {"name": self.name}
        if self.sets is not None:
            data["sets"] = self.sets
        if self.reps is not None:
            data["reps"] = self.reps
        data["focus"] = self.focus
        if self.notes is not None:
            data["notes"] = self.notes
        return data


@dataclass
class WorkoutDay:
    """A day-of-week targeted bundle of exercises (0=Sunday..6=Saturday)."""
    title: str
    day: Optional[int] = None
    exercises: List[Exercise] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkoutDay":
        return cls(
            title=str(data.get("title") or ""),
            day=_parse_int(data.get("day")),
            exercises=[
                Exercise.from_dict(ex)
                for ex in data.get("exercises") or []
                if isinstance(ex, dict)
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "title": self.title,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @property
    def is_schedulable(self) -> bool:
        """A day needs a valid weekday and at least one exercise."""
        return self.day is not None and 0 <= self.day <= 6 and bool(self.exercises)


@dataclass
class Phase:
    """A named stage of a plan template."""
    name: str
    weeks: str = ""
    description: str = ""
    position: int = 0
    workout_days: List[WorkoutDay] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], position: int = 0) -> "Phase":
        days = data.get("workoutDays", data.get("workout_days")) or []
        return cls(
            name=str(data.get("name") or ""),
            weeks=str(data.get("weeks") or ""),
            description=str(data.get("description") or ""),
            position=_parse_int(data.get("position"), default=position),
            workout_days=[WorkoutDay.from_dict(d) for d in days if isinstance(d, dict)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "weeks": self.weeks,
            "description": self.description,
            "position": self.position,
            "workoutDays": [d.to_dict() for d in self.workout_days],
        }

    @property
    def week_count(self) -> int:
        """
        Number of weeks the phase spans, read from its descriptor.

        "Weeks 1 & 2" -> 2, "Weeks 1-3" -> 3, "4 weeks" -> 4, "Week 5" -> 1.
        """
        numbers = [int(n) for n in _NUMBER.findall(self.weeks)]
        if not numbers:
            return DEFAULT_PHASE_WEEKS
        if self.weeks.strip().lower().startswith("week"):
            # Week labels: the numbers are week indices
            return max(numbers) - min(numbers) + 1
        return max(numbers[0], 1)


def _parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return default


def parse_phases(raw: Optional[Iterable[Union[Phase, Dict[str, Any]]]]) -> List[Phase]:
    """Build Phase objects from dicts (or pass Phase objects through)."""
    phases = []
    for position, item in enumerate(raw or []):
        if isinstance(item, Phase):
            phases.append(item)
        elif isinstance(item, dict):
            phases.append(Phase.from_dict(item, position=position))
    return phases


def flatten_workout_days(phases: Iterable[Phase]) -> List[WorkoutDay]:
    """Schedulable workout days in phase order, then in-phase order."""
    return [
        day
        for phase in sorted(phases, key=lambda p: p.position)
        for day in phase.workout_days
        if day.is_schedulable
    ]


def template_span_days(phases: Iterable[Phase]) -> int:
    """Total calendar days the template's phases cover."""
    return sum(phase.week_count for phase in phases) * 7
