import datetime

from fastapi import HTTPException, status

from helgdagar.core.config import DEFAULT_HOLIDAY_VARIANT
from helgdagar.core.constants import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR
from helgdagar.core.errors import YearOutOfRangeError
from helgdagar.core.holidays import normalize_variant
from helgdagar.core.weekdays import parse_iso_date


def validate_year(year: int) -> int:
    """
    Säkerställ att året ligger inom 1583-2600.

    Returnerar year om det är giltigt, annars kastas 400.
    """
    if not MIN_SUPPORTED_YEAR <= year <= MAX_SUPPORTED_YEAR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(YearOutOfRangeError(year)),
        )
    return year


def validate_variant(variant: str | None) -> str:
    """
    Validerar namnet på en helgdagsvariant.

    - None ger standardvarianten (HOLIDAY_VARIANT).
    - Okänt namn ger HTTP 400.
    """
    if variant is None:
        return DEFAULT_HOLIDAY_VARIANT

    try:
        return normalize_variant(variant)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


def validate_date_string(value: str) -> datetime.date:
    """
    Validerar ett datum på formen YYYY-MM-DD.

    Returnerar datetime.date, ogiltigt format eller år utanför intervallet ger HTTP 400.
    """
    try:
        day = parse_iso_date(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date",
        )

    validate_year(day.year)
    return day
