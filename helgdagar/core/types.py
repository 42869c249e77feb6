# helgdagar/core/types.py

"""
Custom type definitions for the holiday calculations.

NewType wrappers keep ISO date strings and holiday names apart even
though they are all plain strings at runtime.
"""

from typing import NewType

IsoDate = NewType("IsoDate", str)
HolidayName = NewType("HolidayName", str)

# ISO-datum -> svenskt namn
HolidayMap = dict[IsoDate, HolidayName]
