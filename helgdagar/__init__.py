"""
helgdagar - svenska helgdagar beräknade från påskdagen.

Exporterar de publika funktionerna för beräkningarna.
"""

from helgdagar.core.constants import Weekday
from helgdagar.core.easter import easter_constants, easter_sunday
from helgdagar.core.errors import WeekdayNotFoundError, YearOutOfRangeError
from helgdagar.core.holidays import build_holidays, holiday_entries, is_holiday, is_weekend
from helgdagar.core.weekdays import (
    Direction,
    find_closest_weekday,
    find_nth_weekday_after,
    move_weeks,
    parse_iso_date,
    weekday_of,
)

__all__ = [
    "Direction",
    "Weekday",
    "WeekdayNotFoundError",
    "YearOutOfRangeError",
    "build_holidays",
    "easter_constants",
    "easter_sunday",
    "find_closest_weekday",
    "find_nth_weekday_after",
    "holiday_entries",
    "is_holiday",
    "is_weekend",
    "move_weeks",
    "parse_iso_date",
    "weekday_of",
]
