# tests/test_easter.py
"""
Unit tests for the Easter Sunday calculation.

Verifies Gauss's algorithm against known dates, the two April corrections,
and every year in the supported range against an independent algorithm.
"""

import datetime
import logging
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from helgdagar.core.constants import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR
from helgdagar.core.easter import easter_constants, easter_sunday
from helgdagar.core.errors import YearOutOfRangeError

ALL_YEARS = range(MIN_SUPPORTED_YEAR, MAX_SUPPORTED_YEAR + 1)


def anonymous_gregorian_easter(year: int) -> datetime.date:
    """Anonymous Gregorian algorithm, used as an independent reference."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


class TestKnownDates:
    """Easter Sunday for years with published dates."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2023, datetime.date(2023, 4, 9)),
            (2024, datetime.date(2024, 3, 31)),
            (2025, datetime.date(2025, 4, 20)),
            (2008, datetime.date(2008, 3, 23)),
            (2019, datetime.date(2019, 4, 21)),
        ],
    )
    def test_reference_years(self, year, expected):
        """Easter Sunday matches the published date."""
        assert easter_sunday(year) == expected

    def test_april_26_moves_back_one_week(self):
        """1981 computes to April 26 and is corrected to April 19."""
        assert easter_sunday(1981) == datetime.date(1981, 4, 19)

    def test_april_25_exception_moves_back_one_week(self):
        """1954 and 2049 hit d=28, e=6, a>10 and land on April 18."""
        assert easter_sunday(1954) == datetime.date(1954, 4, 18)
        assert easter_sunday(2049) == datetime.date(2049, 4, 18)

    def test_genuine_april_25_is_kept(self):
        """1943 computes to April 25 with d=29, so no correction applies."""
        assert easter_sunday(1943) == datetime.date(1943, 4, 25)

    def test_last_supported_year(self):
        """2600 is inside the supported span."""
        result = easter_sunday(2600)
        assert result.year == 2600
        assert result == anonymous_gregorian_easter(2600)


class TestSupportedRange:
    """Range validation for the constant table."""

    @pytest.mark.parametrize("year", [1582, 2601, 0, -1, 10000])
    def test_out_of_range_raises(self, year):
        """Years outside 1583-2600 raise YearOutOfRangeError."""
        with pytest.raises(YearOutOfRangeError) as exc_info:
            easter_sunday(year)

        assert exc_info.value.year == year
        assert "1583-2600" in str(exc_info.value)

    def test_out_of_range_logs_warning_not_error(self, caplog):
        """An invalid year is the caller's mistake and logs at WARNING."""
        with caplog.at_level(logging.DEBUG, logger="helgdagar.core.easter"):
            with pytest.raises(YearOutOfRangeError):
                easter_constants(1582)

        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    def test_range_error_is_value_error(self):
        """Callers catching ValueError also catch range errors."""
        with pytest.raises(ValueError):
            easter_sunday(1500)

    @pytest.mark.parametrize(
        "year,expected",
        [
            (1583, (22, 2)),
            (1699, (22, 2)),
            (1700, (23, 3)),
            (1899, (23, 4)),
            (1900, (24, 5)),
            (2099, (24, 5)),
            (2100, (24, 6)),
            (2200, (25, 0)),
            (2399, (26, 1)),
            (2400, (25, 1)),
            (2599, (26, 2)),
            (2600, (27, 3)),
        ],
    )
    def test_constants_by_band(self, year, expected):
        """Band boundaries are inclusive on both ends."""
        assert easter_constants(year) == expected


class TestAllYears:
    """Properties that hold for every supported year."""

    def test_march_or_april_of_same_year(self):
        """Easter Sunday always falls in March or April of the given year."""
        for year in ALL_YEARS:
            result = easter_sunday(year)
            assert result.year == year
            assert result.month in (3, 4), f"{year}: {result}"

    def test_always_a_sunday(self):
        """Easter Sunday is a Sunday."""
        for year in ALL_YEARS:
            assert easter_sunday(year).weekday() == 6, year

    def test_never_april_26(self):
        """The April 26 correction leaves no year on April 26."""
        for year in ALL_YEARS:
            assert easter_sunday(year) != datetime.date(year, 4, 26), year

    def test_matches_anonymous_gregorian_algorithm(self):
        """Gauss with corrections agrees with the anonymous Gregorian algorithm."""
        mismatches = [
            (year, easter_sunday(year), anonymous_gregorian_easter(year))
            for year in ALL_YEARS
            if easter_sunday(year) != anonymous_gregorian_easter(year)
        ]
        assert mismatches == []
