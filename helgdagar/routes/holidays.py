# helgdagar/routes/holidays.py
"""
API endpoints for Swedish holidays.
"""

import datetime

from fastapi import APIRouter, Query

from helgdagar.core.constants import WEEKDAY_NAMES_SV
from helgdagar.core.holidays import holiday_entries, is_holiday, is_weekend
from helgdagar.core.models import DateCheckResponse, HolidayOut, HolidayYearResponse
from helgdagar.core.validators import validate_date_string, validate_variant, validate_year
from helgdagar.core.weekdays import weekday_of

router = APIRouter(prefix="/api", tags=["holidays"])


def _year_response(year: int, variant: str | None) -> HolidayYearResponse:
    year = validate_year(year)
    variant_name = validate_variant(variant)

    holidays = [
        HolidayOut(date=day.isoformat(), name=name, weekday=WEEKDAY_NAMES_SV[weekday_of(day)])
        for day, name in holiday_entries(year, variant_name)
    ]
    return HolidayYearResponse(year=year, variant=variant_name, holidays=holidays)


@router.get("/holidays", response_model=HolidayYearResponse)
async def get_current_year_holidays(variant: str | None = Query(default=None)):
    """Holidays for the current year."""
    return _year_response(datetime.date.today().year, variant)


@router.get("/holidays/{year}", response_model=HolidayYearResponse)
async def get_holidays_for_year(year: int, variant: str | None = Query(default=None)):
    """Holidays for a given year, sorted by date."""
    return _year_response(year, variant)


@router.get("/dates/{date}", response_model=DateCheckResponse)
async def check_date(date: str, variant: str | None = Query(default=None)):
    """Whether a date is a holiday and/or falls on a weekend."""
    day = validate_date_string(date)
    variant_name = validate_variant(variant)

    holiday = is_holiday(day, variant_name)
    weekend = is_weekend(day)

    return DateCheckResponse(
        date=day.isoformat(),
        holiday=holiday,
        weekend=weekend,
        day_off=holiday is not None or weekend is not None,
    )
