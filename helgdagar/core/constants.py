# helgdagar/core/constants.py
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping


# ==========================
# Årsintervall
# ==========================

#: Första år som påskberäkningen stödjer (gregorianska kalenderns första hela år).
MIN_SUPPORTED_YEAR: Final[int] = 1583

#: Sista år som påskberäkningen stödjer.
MAX_SUPPORTED_YEAR: Final[int] = 2600


# ==========================
# Gauss påskkonstanter
# ==========================

#: (första år, sista år, M, N) per sekelband, inklusive gränser.
#: Värdena följer Gauss tabell; raden för 2600 är framräknad med samma sekelformel.
EASTER_CONSTANTS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (1583, 1699, 22, 2),
    (1700, 1799, 23, 3),
    (1800, 1899, 23, 4),
    (1900, 2099, 24, 5),
    (2100, 2199, 24, 6),
    (2200, 2299, 25, 0),
    (2300, 2399, 26, 1),
    (2400, 2499, 25, 1),
    (2500, 2599, 26, 2),
    (2600, 2600, 27, 3),
)

#: Dag i mars som Gauss dagsumma räknas från (22 + d + e).
EASTER_BASE_DAY: Final[int] = 22


# ==========================
# Veckodagar
# ==========================


class Weekday(IntEnum):
    """Weekday with Sunday=0, as returned by ``date.isoweekday() % 7``."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


#: Antal dagar per vecka. Används i loops i stället för "7".
DAYS_PER_WEEK: Final[int] = 7

#: Svenska namn på veckodagar, nycklade på Weekday (0=söndag).
WEEKDAY_NAMES_SV: Final[Mapping[Weekday, str]] = MappingProxyType(
    {
        Weekday.SUNDAY: "söndag",
        Weekday.MONDAY: "måndag",
        Weekday.TUESDAY: "tisdag",
        Weekday.WEDNESDAY: "onsdag",
        Weekday.THURSDAY: "torsdag",
        Weekday.FRIDAY: "fredag",
        Weekday.SATURDAY: "lördag",
    }
)

#: Veckodagar som räknas som helg.
WEEKEND_DAYS: Final[frozenset[Weekday]] = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


# ==========================
# Helgdagar
# ==========================

#: Nycklar för alla helgdagar som kan beräknas.
NYARSDAGEN: Final[str] = "nyarsdagen"
TRETTONDEDAG_JUL: Final[str] = "trettondedag_jul"
FORSTA_MAJ: Final[str] = "forsta_maj"
NATIONALDAGEN: Final[str] = "nationaldagen"
JULDAGEN: Final[str] = "juldagen"
ANNANDAG_JUL: Final[str] = "annandag_jul"
JULAFTON: Final[str] = "julafton"
NYARSAFTON: Final[str] = "nyarsafton"
PASKDAGEN: Final[str] = "paskdagen"
LANGFREDAGEN: Final[str] = "langfredagen"
ANNANDAG_PASK: Final[str] = "annandag_pask"
KRISTI_HIMMELSFARDSDAG: Final[str] = "kristi_himmelsfardsdag"
PINGSTDAGEN: Final[str] = "pingstdagen"
MIDSOMMARDAGEN: Final[str] = "midsommardagen"
MIDSOMMARAFTON: Final[str] = "midsommarafton"
ALLA_HELGONS_DAG: Final[str] = "alla_helgons_dag"

#: Visningsnamn per helgdagsnyckel.
HOLIDAY_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        NYARSDAGEN: "nyårsdagen",
        TRETTONDEDAG_JUL: "trettondedag jul",
        FORSTA_MAJ: "första maj",
        NATIONALDAGEN: "nationaldagen",
        JULDAGEN: "juldagen",
        ANNANDAG_JUL: "annandag jul",
        JULAFTON: "julafton",
        NYARSAFTON: "nyårsafton",
        PASKDAGEN: "påskdagen",
        LANGFREDAGEN: "långfredagen",
        ANNANDAG_PASK: "annandag påsk",
        KRISTI_HIMMELSFARDSDAG: "kristi himmelsfärdsdag",
        PINGSTDAGEN: "pingstdagen",
        MIDSOMMARDAGEN: "midsommardagen",
        MIDSOMMARAFTON: "midsommarafton",
        ALLA_HELGONS_DAG: "alla helgons dag",
    }
)

