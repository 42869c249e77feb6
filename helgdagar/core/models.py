from pydantic import BaseModel


class HolidayOut(BaseModel):
    """A single holiday with its date and Swedish weekday name."""
    date: str
    name: str
    weekday: str

class HolidayYearResponse(BaseModel):
    """All holidays for one year, sorted by date."""
    year: int
    variant: str
    holidays: list[HolidayOut]

class DateCheckResponse(BaseModel):
    """Holiday and weekend status for a single date."""
    date: str
    holiday: str | None = None
    weekend: str | None = None
    day_off: bool
