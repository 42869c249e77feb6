# helgdagar/core/weekdays.py
"""
Weekday search and week arithmetic on civil dates.

All functions work on naive ``datetime.date`` values, so results never depend
on the local timezone or daylight saving rules of the machine.
"""

import datetime
import logging
from enum import Enum

from helgdagar.core.constants import DAYS_PER_WEEK, Weekday
from helgdagar.core.errors import WeekdayNotFoundError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Direction to search or move in, relative to an origin date."""

    BEFORE = "before"
    AFTER = "after"


def _to_direction(direction: Direction | str) -> Direction:
    try:
        return Direction(direction)
    except ValueError as e:
        raise ValueError(f"Invalid direction: {direction!r} (expected 'before' or 'after')") from e


def parse_iso_date(value: datetime.date | str) -> datetime.date:
    """
    Return ``value`` as a ``datetime.date``.

    Accepts a date or a zero-padded ``YYYY-MM-DD`` string. Datetimes are rejected since
    they carry a time of day.
    """
    if isinstance(value, datetime.datetime):
        raise ValueError(f"Expected a calendar date, got datetime: {value!r}")

    if isinstance(value, datetime.date):
        return value

    if isinstance(value, str):
        try:
            parsed = datetime.datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as e:
            raise ValueError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)") from e

        # strptime godtar även "2023-4-9"
        if parsed.isoformat() != value:
            raise ValueError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")
        return parsed

    raise ValueError(f"Unsupported date type: {type(value).__name__}")


def weekday_of(day: datetime.date) -> Weekday:
    """Weekday of ``day`` with Sunday=0."""
    return Weekday(day.isoweekday() % DAYS_PER_WEEK)


def find_closest_weekday(
    origin: datetime.date,
    target: Weekday | int,
    direction: Direction | str,
) -> datetime.date:
    """
    Find the closest ``target`` weekday at or before/after ``origin``.

    The origin itself is checked first, so a matching origin is returned
    unchanged. At most six more days are checked in ``direction``.
    """
    step = datetime.timedelta(days=1)
    if _to_direction(direction) is Direction.BEFORE:
        step = -step

    day = origin
    for _ in range(DAYS_PER_WEEK):
        if weekday_of(day) == target:
            return day
        day += step

    logger.error(
        "No weekday match within a week. origin=%s target=%r direction=%s",
        origin,
        target,
        direction,
    )
    raise WeekdayNotFoundError(f"Found no weekday {target!r} within a week {direction} {origin.isoformat()}")


def move_weeks(origin: datetime.date, weeks: int, direction: Direction | str) -> datetime.date:
    """Move ``origin`` a whole number of weeks before or after."""
    delta = datetime.timedelta(weeks=weeks)
    if _to_direction(direction) is Direction.BEFORE:
        return origin - delta
    return origin + delta


def find_nth_weekday_after(origin: datetime.date, weekday: Weekday | int, nth: int) -> datetime.date:
    """
    The first ``weekday`` at or after ``origin``, moved ``nth`` weeks forward.

    With Easter Sunday as origin, ``THURSDAY, 5`` gives Ascension Day and
    ``SUNDAY, 7`` gives Pentecost.
    """
    first = find_closest_weekday(origin, weekday, Direction.AFTER)
    return move_weeks(first, nth, Direction.AFTER)
