"""
Calendar date helpers.

Everything here works on calendar dates; time-of-day and time zones
never enter the arithmetic.
"""
from datetime import date, datetime, timedelta
from typing import Iterator, Union

DateLike = Union[date, datetime, str]

# 0=Sunday .. 6=Saturday
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)


def to_calendar_date(value: DateLike) -> date:
    """
    Normalize a date, datetime or ISO string to a calendar date.

    Datetimes keep their own wall-clock date; no timezone conversion is
    applied. Strings may carry a time part ("2025-03-04T18:30:00Z"),
    which is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")


def day_of_week(day: date) -> int:
    """Day-of-week index with 0=Sunday."""
    return day.isoweekday() % 7


def next_weekday(anchor: date, target_dow: int) -> date:
    """First date on or after anchor that falls on target_dow (0=Sunday)."""
    return anchor + timedelta(days=(target_dow - day_of_week(anchor)) % 7)


def format_date(day: date) -> str:
    """YYYY-MM-DD built from the date's own components."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def iter_week_anchors(start: date, end: date) -> Iterator[date]:
    """start, start+7, ... while the anchor does not pass end."""
    anchor = start
    while anchor <= end:
        yield anchor
        anchor += timedelta(days=7)
