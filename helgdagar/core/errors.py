# helgdagar/core/errors.py
"""
Exceptions raised by the holiday calculations.
"""

from helgdagar.core.constants import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR


class YearOutOfRangeError(ValueError):
    """Raised when a year is outside the span the Easter table covers."""

    def __init__(self, year: int, min_year: int = MIN_SUPPORTED_YEAR, max_year: int = MAX_SUPPORTED_YEAR):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(f"The given year - {year} - is outside of the possible range - {min_year}-{max_year}")


class WeekdayNotFoundError(RuntimeError):
    """
    Raised when a weekday search checks a full week without a match.

    Every weekday occurs within seven consecutive days, so this only happens
    when the target is not a real weekday.
    """
