# helgdagar/core/easter.py
"""
Easter Sunday by Gauss's algorithm.

Based on https://www.eit.lth.se/fileadmin/eit/courses/edi021/DP_Gauss.html
"""

import datetime
import logging
from functools import lru_cache

from helgdagar.core.constants import EASTER_BASE_DAY, EASTER_CONSTANTS
from helgdagar.core.errors import YearOutOfRangeError
from helgdagar.core.weekdays import Direction, move_weeks

logger = logging.getLogger(__name__)


def easter_constants(year: int) -> tuple[int, int]:
    """Return Gauss's (M, N) for the century band containing ``year``."""
    for first_year, last_year, m, n in EASTER_CONSTANTS:
        if first_year <= year <= last_year:
            return m, n

    logger.warning("Year outside supported Easter range. year=%s", year)
    raise YearOutOfRangeError(year)


@lru_cache(maxsize=None)
def easter_sunday(year: int) -> datetime.date:
    """
    Easter Sunday (påskdagen) for ``year``.

    Raises YearOutOfRangeError for years outside 1583-2600.
    """
    m, n = easter_constants(year)

    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + m) % 30
    e = (2 * b + 4 * c + 6 * d + n) % 7
    day = EASTER_BASE_DAY + d + e

    if day <= 31:
        paskdagen = datetime.date(year, 3, day)
    else:
        paskdagen = datetime.date(year, 4, day - 31)

    # Gauss undantag: 26 april blir 19 april, 25 april blir 18 april när d=28, e=6 och a>10
    if paskdagen == datetime.date(year, 4, 26):
        paskdagen = move_weeks(paskdagen, 1, Direction.BEFORE)

    if paskdagen == datetime.date(year, 4, 25) and d == 28 and e == 6 and a > 10:
        paskdagen = move_weeks(paskdagen, 1, Direction.BEFORE)

    return paskdagen
