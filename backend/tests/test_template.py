"""Tests for template parsing and calendar helpers."""

from datetime import date, datetime

import pytest

from volleycoach.services.scheduling import Phase
from volleycoach.services.scheduling.dates import (
    day_of_week,
    format_date,
    iter_week_anchors,
    next_weekday,
    to_calendar_date,
)
from volleycoach.services.scheduling.template import (
    Exercise,
    WorkoutDay,
    flatten_workout_days,
    parse_phases,
    template_span_days,
)
from volleycoach.templates import get_template, list_templates


class TestDates:
    """Tests for calendar date helpers."""

    def test_day_of_week_starts_on_sunday(self):
        assert day_of_week(date(2024, 1, 7)) == 0
        assert day_of_week(date(2024, 1, 8)) == 1
        assert day_of_week(date(2024, 1, 13)) == 6

    @pytest.mark.parametrize("value", [
        date(2024, 3, 4),
        datetime(2024, 3, 4, 18, 30),
        "2024-03-04",
        "2024-03-04T18:30:00Z",
    ])
    def test_to_calendar_date(self, value):
        assert to_calendar_date(value) == date(2024, 3, 4)

    def test_to_calendar_date_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_calendar_date(20240304)

    def test_next_weekday(self):
        wednesday = date(2024, 1, 10)
        assert next_weekday(wednesday, 3) == wednesday
        assert next_weekday(wednesday, 5) == date(2024, 1, 12)
        assert next_weekday(wednesday, 1) == date(2024, 1, 15)

    def test_format_date_pads(self):
        assert format_date(date(987, 2, 3)) == "0987-02-03"

    def test_week_anchors_inclusive(self):
        anchors = list(iter_week_anchors(date(2024, 1, 1), date(2024, 1, 15)))
        assert anchors == [date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15)]


class TestPhaseParsing:
    """Tests for lenient template parsing."""

    @pytest.mark.parametrize("weeks, expected", [
        ("Weeks 1 & 2", 2),
        ("Weeks 3 & 4", 2),
        ("Weeks 1-3", 3),
        ("Weeks 1-4", 4),
        ("Week 5", 1),
        ("4 weeks", 4),
        ("", 2),
        ("Ongoing", 2),
    ])
    def test_week_count(self, weeks, expected):
        assert Phase(name="Phase", weeks=weeks).week_count == expected

    def test_from_dict_accepts_both_key_styles(self):
        camel = Phase.from_dict({"name": "A", "workoutDays": [{"day": 1, "title": "Lift"}]})
        snake = Phase.from_dict({"name": "A", "workout_days": [{"day": 1, "title": "Lift"}]})

        assert camel.workout_days == snake.workout_days
        assert camel.workout_days[0].title == "Lift"

    def test_to_dict_uses_camel_case(self):
        phase = Phase.from_dict({
            "name": "Foundation",
            "weeks": "Weeks 1-3",
            "workoutDays": [{"day": "2", "title": "Basics", "exercises": [{"name": "Passing"}]}],
        })

        data = phase.to_dict()
        assert data["workoutDays"][0]["day"] == 2
        assert data["workoutDays"][0]["exercises"] == [{"name": "Passing"}]

    def test_parse_phases_skips_non_dicts_and_assigns_positions(self):
        phases = parse_phases([{"name": "One"}, "junk", None, {"name": "Two"}])

        assert [p.name for p in phases] == ["One", "Two"]
        assert [p.position for p in phases] == [0, 3]

    def test_exercise_to_dict_omits_missing_fields(self):
        assert Exercise(name="Plank", reps="45s").to_dict() == {
            "name": "Plank",
            "reps": "45s",
            "focus": "",
        }

    def test_parsed_exercise_keeps_authored_fields(self):
        authored = {"name": "Wall Sit", "reps": "45s", "videoUrl": "https://example.com/wall-sit"}

        assert Exercise.from_dict(authored).to_dict() == authored

    def test_missing_exercise_name_is_empty(self):
        assert Exercise.from_dict({"name": None}).name == ""

    @pytest.mark.parametrize("day, exercises, expected", [
        (0, [Exercise("Squat")], True),
        (6, [Exercise("Squat")], True),
        (7, [Exercise("Squat")], False),
        (-1, [Exercise("Squat")], False),
        (None, [Exercise("Squat")], False),
        (3, [], False),
    ])
    def test_is_schedulable(self, day, exercises, expected):
        assert WorkoutDay(title="Day", day=day, exercises=exercises).is_schedulable is expected

    def test_boolean_day_is_not_a_weekday(self):
        assert WorkoutDay.from_dict({"day": True, "title": "x"}).day is None

    def test_flatten_drops_unschedulable_days(self):
        phases = parse_phases([{
            "name": "P",
            "workoutDays": [
                {"day": 1, "title": "Keep", "exercises": [{"name": "Squat"}]},
                {"day": 2, "title": "Drop", "exercises": []},
            ],
        }])

        assert [d.title for d in flatten_workout_days(phases)] == ["Keep"]


class TestCatalog:
    """Tests for the built-in template catalog."""

    def test_lists_three_templates(self):
        ids = [t["id"] for t in list_templates()]
        assert ids == [
            "4-week-volleyball-performance",
            "beginner-fundamentals",
            "setter-specialist",
        ]

    def test_get_template_returns_copy(self):
        template = get_template("beginner-fundamentals")
        template["phases"].clear()

        assert get_template("beginner-fundamentals")["phases"]

    def test_unknown_template(self):
        assert get_template("does-not-exist") is None

    @pytest.mark.parametrize("template_id, weeks", [
        ("4-week-volleyball-performance", 4),
        ("beginner-fundamentals", 3),
        ("setter-specialist", 4),
    ])
    def test_template_spans(self, template_id, weeks):
        phases = parse_phases(get_template(template_id)["phases"])
        assert template_span_days(phases) == weeks * 7

    def test_every_catalog_day_is_schedulable(self):
        for template in list_templates():
            for phase in parse_phases(template["phases"]):
                assert all(day.is_schedulable for day in phase.workout_days), template["id"]
