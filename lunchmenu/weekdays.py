from datetime import date
from typing import NamedTuple, Optional

from .errors import InvalidDayError, InvalidWeekError, NoMenuOnWeekendError


class WeekdayEntry(NamedTuple):
    danish: str
    english: str


class Target(NamedTuple):
    week_number: int
    weekday: WeekdayEntry


WEEKDAYS = (
    WeekdayEntry("mandag", "monday"),
    WeekdayEntry("tirsdag", "tuesday"),
    WeekdayEntry("onsdag", "wednesday"),
    WeekdayEntry("torsdag", "thursday"),
    WeekdayEntry("fredag", "friday"),
)

MIN_WEEK = 1
MAX_WEEK = 53


def get_week_number(day: date) -> int:
    """ISO-8601 week number: week 1 is the week holding the year's first Thursday."""
    return day.isocalendar()[1]


def get_day_by_name(name: str) -> Optional[WeekdayEntry]:
    wanted = name.strip().lower()
    for entry in WEEKDAYS:
        if wanted in (entry.danish, entry.english):
            return entry
    return None


def get_day_for_date(day: date) -> WeekdayEntry:
    index = day.weekday()  # Monday is 0, Sunday is 6
    if index >= len(WEEKDAYS):
        raise NoMenuOnWeekendError("No menu available on weekends")
    return WEEKDAYS[index]


def parse_week(value) -> int:
    try:
        week = int(str(value).strip())
    except ValueError:
        raise InvalidWeekError(f"Invalid week number: {value!r}. Must be between {MIN_WEEK} and {MAX_WEEK}.")

    if not MIN_WEEK <= week <= MAX_WEEK:
        raise InvalidWeekError(f"Invalid week number: {value!r}. Must be between {MIN_WEEK} and {MAX_WEEK}.")
    return week


def valid_day_names():
    names = [entry.danish for entry in WEEKDAYS]
    names += [entry.english for entry in WEEKDAYS]
    return names


def parse_day(value: str) -> WeekdayEntry:
    entry = get_day_by_name(value)
    if entry is None:
        raise InvalidDayError(f"Invalid day: {value!r}. Valid days: {', '.join(valid_day_names())}")
    return entry


def resolve_target(today: date, week=None, day=None) -> Target:
    """Build the run's target from today's date, letting explicit overrides win.

    A day override means the weekend check never runs, so the script can still
    be used on a Saturday to look up Friday's menu.
    """
    week_number = parse_week(week) if week is not None else get_week_number(today)
    weekday = parse_day(day) if day is not None else get_day_for_date(today)
    return Target(week_number, weekday)
