# tests/test_weekdays.py
"""
Unit tests for weekday search and week arithmetic.
"""

import datetime
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from helgdagar.core.constants import Weekday
from helgdagar.core.errors import WeekdayNotFoundError
from helgdagar.core.weekdays import (
    Direction,
    find_closest_weekday,
    find_nth_weekday_after,
    move_weeks,
    parse_iso_date,
    weekday_of,
)


class TestWeekdayOf:
    def test_sunday_is_zero(self):
        """2023-01-01 was a Sunday and encodes as 0."""
        assert weekday_of(datetime.date(2023, 1, 1)) == Weekday.SUNDAY
        assert int(weekday_of(datetime.date(2023, 1, 1))) == 0

    def test_saturday_is_six(self):
        assert weekday_of(datetime.date(2023, 1, 7)) == Weekday.SATURDAY
        assert int(weekday_of(datetime.date(2023, 1, 7))) == 6


class TestFindClosestWeekday:
    """Day-by-day search for the nearest weekday."""

    @pytest.mark.parametrize("direction", [Direction.BEFORE, Direction.AFTER])
    def test_matching_origin_is_returned_unchanged(self, direction):
        """A Sunday origin searching for Sunday returns the origin itself."""
        origin = datetime.date(2023, 4, 9)
        assert find_closest_weekday(origin, Weekday.SUNDAY, direction) == origin

    def test_search_before(self):
        """Friday before Easter Sunday 2023 is April 7."""
        result = find_closest_weekday(datetime.date(2023, 4, 9), Weekday.FRIDAY, Direction.BEFORE)
        assert result == datetime.date(2023, 4, 7)

    def test_search_after_crosses_month(self):
        """Saturday after Friday June 30 2023 is July 1."""
        result = find_closest_weekday(datetime.date(2023, 6, 30), Weekday.SATURDAY, Direction.AFTER)
        assert result == datetime.date(2023, 7, 1)

    def test_search_before_crosses_year(self):
        """Saturday before Sunday January 1 2023 is December 31 2022."""
        result = find_closest_weekday(datetime.date(2023, 1, 1), Weekday.SATURDAY, Direction.BEFORE)
        assert result == datetime.date(2022, 12, 31)

    def test_farthest_match_is_six_days_away(self):
        """Searching for yesterday's weekday forward takes six steps."""
        origin = datetime.date(2023, 4, 9)  # Sunday
        result = find_closest_weekday(origin, Weekday.SATURDAY, Direction.AFTER)
        assert result == origin + datetime.timedelta(days=6)

    def test_plain_string_direction(self):
        """Directions may be given as plain strings."""
        result = find_closest_weekday(datetime.date(2023, 4, 9), Weekday.FRIDAY, "before")
        assert result == datetime.date(2023, 4, 7)

    def test_plain_int_target(self):
        """Targets may be given as plain ints with Sunday=0."""
        result = find_closest_weekday(datetime.date(2023, 4, 9), 5, Direction.BEFORE)
        assert result == datetime.date(2023, 4, 7)

    def test_impossible_target_raises(self):
        """A target that is not a weekday exhausts the search."""
        with pytest.raises(WeekdayNotFoundError):
            find_closest_weekday(datetime.date(2023, 4, 9), 7, Direction.AFTER)

    def test_invalid_direction_raises(self):
        with pytest.raises(ValueError, match="Invalid direction"):
            find_closest_weekday(datetime.date(2023, 4, 9), Weekday.FRIDAY, "sideways")


class TestMoveWeeks:
    """Whole-week offsets."""

    def test_move_after_lands_on_leap_day(self):
        assert move_weeks(datetime.date(2024, 2, 22), 1, Direction.AFTER) == datetime.date(2024, 2, 29)

    def test_move_before_crosses_year(self):
        assert move_weeks(datetime.date(2024, 1, 3), 1, Direction.BEFORE) == datetime.date(2023, 12, 27)

    def test_zero_weeks_is_identity(self):
        origin = datetime.date(2023, 4, 9)
        assert move_weeks(origin, 0, Direction.AFTER) == origin
        assert move_weeks(origin, 0, Direction.BEFORE) == origin

    @pytest.mark.parametrize(
        "origin",
        [
            datetime.date(2024, 2, 29),
            datetime.date(2023, 12, 31),
            datetime.date(1583, 3, 1),
            datetime.date(2600, 6, 15),
        ],
    )
    @pytest.mark.parametrize("weeks", [0, 1, 5, 52, 520, -3])
    def test_round_trip(self, origin, weeks):
        """Moving n weeks after and then n weeks before returns the origin."""
        moved = move_weeks(origin, weeks, Direction.AFTER)
        assert move_weeks(moved, weeks, Direction.BEFORE) == origin


class TestFindNthWeekdayAfter:
    def test_ascension_day_2023(self):
        """Fifth Thursday from Easter Sunday 2023 is May 18."""
        result = find_nth_weekday_after(datetime.date(2023, 4, 9), Weekday.THURSDAY, 5)
        assert result == datetime.date(2023, 5, 18)

    def test_matching_origin_counts_as_first(self):
        """Pentecost: the Easter Sunday itself is the first Sunday."""
        result = find_nth_weekday_after(datetime.date(2023, 4, 9), Weekday.SUNDAY, 7)
        assert result == datetime.date(2023, 5, 28)


class TestParseIsoDate:
    def test_parses_string(self):
        assert parse_iso_date("2023-04-09") == datetime.date(2023, 4, 9)

    def test_passes_date_through(self):
        day = datetime.date(2023, 4, 9)
        assert parse_iso_date(day) is day

    def test_rejects_datetime(self):
        with pytest.raises(ValueError):
            parse_iso_date(datetime.datetime(2023, 4, 9, 12, 0))

    @pytest.mark.parametrize(
        "value",
        ["2023-02-30", "not a date", "", "09/04/2023", "2023-4-9", "2023-04-9", " 2023-04-09", "2023-04-09 "],
    )
    def test_rejects_malformed_string(self, value):
        with pytest.raises(ValueError):
            parse_iso_date(value)

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="Unsupported date type"):
            parse_iso_date(20230409)
