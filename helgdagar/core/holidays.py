# helgdagar/core/holidays.py
"""
Svenska helgdagar för ett år.

Based on Lag (1989:253) om allmänna helgdagar and Semesterlag (1977:480).
"""

import datetime
import logging
from collections.abc import Callable, Iterable
from typing import Final

from helgdagar.core.config import DEFAULT_HOLIDAY_VARIANT, HOLIDAY_VARIANTS
from helgdagar.core.constants import (
    ALLA_HELGONS_DAG,
    ANNANDAG_JUL,
    ANNANDAG_PASK,
    FORSTA_MAJ,
    HOLIDAY_NAMES,
    JULAFTON,
    JULDAGEN,
    KRISTI_HIMMELSFARDSDAG,
    LANGFREDAGEN,
    MIDSOMMARAFTON,
    MIDSOMMARDAGEN,
    NATIONALDAGEN,
    NYARSAFTON,
    NYARSDAGEN,
    PASKDAGEN,
    PINGSTDAGEN,
    TRETTONDEDAG_JUL,
    WEEKDAY_NAMES_SV,
    WEEKEND_DAYS,
    Weekday,
)
from helgdagar.core.easter import easter_sunday
from helgdagar.core.types import HolidayMap, HolidayName, IsoDate
from helgdagar.core.weekdays import (
    Direction,
    find_closest_weekday,
    find_nth_weekday_after,
    parse_iso_date,
    weekday_of,
)

logger = logging.getLogger(__name__)


def nyarsdagen(year: int) -> datetime.date:
    """New Year's Day: January 1st."""
    return datetime.date(year, 1, 1)


def trettondedag_jul(year: int) -> datetime.date:
    """Epiphany / January 6."""
    return datetime.date(year, 1, 6)


def forsta_maj(year: int) -> datetime.date:
    """May 1st (Labour Day)."""
    return datetime.date(year, 5, 1)


def nationaldagen(year: int) -> datetime.date:
    """Swedish National Day, June 6th."""
    return datetime.date(year, 6, 6)


def julafton(year: int) -> datetime.date:
    return datetime.date(year, 12, 24)


def juldagen(year: int) -> datetime.date:
    return datetime.date(year, 12, 25)


def annandag_jul(year: int) -> datetime.date:
    return datetime.date(year, 12, 26)


def nyarsafton(year: int) -> datetime.date:
    return datetime.date(year, 12, 31)


def paskdagen(year: int) -> datetime.date:
    """Easter Sunday."""
    return easter_sunday(year)


def langfredagen(year: int) -> datetime.date:
    """Good Friday (Långfredagen): Friday before Easter Sunday."""
    return find_closest_weekday(easter_sunday(year), Weekday.FRIDAY, Direction.BEFORE)


def annandag_pask(year: int) -> datetime.date:
    """Easter Monday: the day after Easter Sunday."""
    return easter_sunday(year) + datetime.timedelta(days=1)


def kristi_himmelsfardsdag(year: int) -> datetime.date:
    """Ascension Day: fifth Thursday after Easter Sunday's first Thursday."""
    return find_nth_weekday_after(easter_sunday(year), Weekday.THURSDAY, 5)


def pingstdagen(year: int) -> datetime.date:
    """Pentecost: seven weeks after Easter Sunday."""
    return find_nth_weekday_after(easter_sunday(year), Weekday.SUNDAY, 7)


def midsommardagen(year: int) -> datetime.date:
    """Saturday between 20 and 26 June."""
    return find_closest_weekday(datetime.date(year, 6, 20), Weekday.SATURDAY, Direction.AFTER)


def midsommarafton(year: int) -> datetime.date:
    """Friday between 19 and 25 June."""
    return find_closest_weekday(datetime.date(year, 6, 19), Weekday.FRIDAY, Direction.AFTER)


def alla_helgons_dag(year: int) -> datetime.date:
    """Saturday between 31 Oct and 6 Nov."""
    return find_closest_weekday(datetime.date(year, 10, 31), Weekday.SATURDAY, Direction.AFTER)


# Byggordning: fasta datum först, sedan de rörliga. Senare rad vinner vid krock.
HOLIDAY_RULES: Final[tuple[tuple[str, Callable[[int], datetime.date]], ...]] = (
    (NYARSDAGEN, nyarsdagen),
    (TRETTONDEDAG_JUL, trettondedag_jul),
    (FORSTA_MAJ, forsta_maj),
    (NATIONALDAGEN, nationaldagen),
    (JULDAGEN, juldagen),
    (ANNANDAG_JUL, annandag_jul),
    (JULAFTON, julafton),
    (NYARSAFTON, nyarsafton),
    (PASKDAGEN, paskdagen),
    (LANGFREDAGEN, langfredagen),
    (ANNANDAG_PASK, annandag_pask),
    (KRISTI_HIMMELSFARDSDAG, kristi_himmelsfardsdag),
    (PINGSTDAGEN, pingstdagen),
    (MIDSOMMARDAGEN, midsommardagen),
    (MIDSOMMARAFTON, midsommarafton),
    (ALLA_HELGONS_DAG, alla_helgons_dag),
)


def normalize_variant(variant: str) -> str:
    """
    Return the canonical variant name, ignoring case and surrounding spaces.

    Raises ValueError for unknown variants.
    """
    name = variant.strip().lower()
    if name not in HOLIDAY_VARIANTS:
        raise ValueError(
            f"Unknown holiday variant: {variant!r} (expected one of {', '.join(sorted(HOLIDAY_VARIANTS))})"
        )
    return name


def resolve_inclusion(include: str | Iterable[str] | None = None) -> frozenset[str]:
    """
    Turn a variant name, an iterable of holiday keys or None into a key set.

    None means the configured default variant (HOLIDAY_VARIANT).
    """
    if include is None:
        include = DEFAULT_HOLIDAY_VARIANT

    if isinstance(include, str):
        return HOLIDAY_VARIANTS[normalize_variant(include)]

    keys = frozenset(include)
    unknown = keys - HOLIDAY_NAMES.keys()
    if unknown:
        raise ValueError(f"Unknown holiday keys: {', '.join(sorted(unknown))}")
    return keys


def build_holidays(year: int | None = None, include: str | Iterable[str] | None = None) -> HolidayMap:
    """
    Bygger alla helgdagar för ett år.

    Args:
        year: Year to build, defaults to the current year
        include: Variant name ("statutory", "full"), iterable of holiday keys,
            or None for the configured default

    Returns:
        Dict with ISO date as key and Swedish name as value, in build order.
        If two holidays share a date the later one in build order wins.

    Raises:
        YearOutOfRangeError: year is outside 1583-2600
        ValueError: unknown variant or holiday key
    """
    if year is None:
        year = datetime.date.today().year

    selected = resolve_inclusion(include)

    # Påsk beräknas först så att ett ogiltigt år avbryter innan något byggs
    easter_sunday(year)

    holidays: HolidayMap = {}

    for key, calc in HOLIDAY_RULES:
        if key in selected:
            holidays[IsoDate(calc(year).isoformat())] = HolidayName(HOLIDAY_NAMES[key])

    logger.debug(
        "Built %d holidays for %s",
        len(holidays),
        year,
        extra={"extra_fields": {"year": year, "holiday_count": len(holidays)}},
    )
    return holidays


def holiday_entries(year: int | None = None, include: str | Iterable[str] | None = None) -> list[tuple[datetime.date, str]]:
    """Holidays for a year as (date, name) pairs sorted by date."""
    holidays = build_holidays(year, include)
    return sorted((datetime.date.fromisoformat(iso), name) for iso, name in holidays.items())


def is_holiday(day: datetime.date | str, include: str | Iterable[str] | None = None) -> str | None:
    """
    Kollar om ett datum är en helgdag.

    Returns the Swedish holiday name, or None if the date is not a holiday.
    """
    d = parse_iso_date(day)
    return build_holidays(d.year, include).get(IsoDate(d.isoformat()))


def is_weekend(day: datetime.date | str) -> str | None:
    """
    Kollar om ett datum infaller på en helg.

    Returns the Swedish weekday name ("lördag"/"söndag"), or None on weekdays.
    """
    weekday = weekday_of(parse_iso_date(day))
    if weekday in WEEKEND_DAYS:
        return WEEKDAY_NAMES_SV[weekday]
    return None
