# helgdagar/core/config.py

import os
from types import MappingProxyType
from typing import Final, Mapping

from helgdagar.core.constants import (
    ALLA_HELGONS_DAG,
    ANNANDAG_JUL,
    ANNANDAG_PASK,
    FORSTA_MAJ,
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
)


# ==========================
# Urval av helgdagar (varianter)
# ==========================

#: Allmänna helgdagar enligt Lag (1989:253) om allmänna helgdagar.
STATUTORY_HOLIDAYS: Final[frozenset[str]] = frozenset(
    {
        NYARSDAGEN,
        TRETTONDEDAG_JUL,
        LANGFREDAGEN,
        PASKDAGEN,
        ANNANDAG_PASK,
        KRISTI_HIMMELSFARDSDAG,
        FORSTA_MAJ,
        PINGSTDAGEN,
        NATIONALDAGEN,
        MIDSOMMARDAGEN,
        ALLA_HELGONS_DAG,
        JULDAGEN,
        ANNANDAG_JUL,
    }
)

#: Aftnar som likställs med allmän helgdag enligt Semesterlag (1977:480).
EVE_HOLIDAYS: Final[frozenset[str]] = frozenset({JULAFTON, MIDSOMMARAFTON, NYARSAFTON})

#: Den fullare varianten: lagstadgade helgdagar plus aftnarna.
FULL_HOLIDAYS: Final[frozenset[str]] = STATUTORY_HOLIDAYS | EVE_HOLIDAYS

VARIANT_STATUTORY: Final[str] = "statutory"
VARIANT_FULL: Final[str] = "full"

#: Namngivna varianter som kan väljas via API eller HOLIDAY_VARIANT.
HOLIDAY_VARIANTS: Final[Mapping[str, frozenset[str]]] = MappingProxyType(
    {
        VARIANT_STATUTORY: STATUTORY_HOLIDAYS,
        VARIANT_FULL: FULL_HOLIDAYS,
    }
)


# ==========================
# Miljö
# ==========================

#: Variant som används när anroparen inte anger någon.
#: Läses från HOLIDAY_VARIANT, standard är "full".
DEFAULT_HOLIDAY_VARIANT: Final[str] = os.getenv("HOLIDAY_VARIANT", VARIANT_FULL).strip().lower()

#: Om appen körs i produktionsläge (JSON-loggning, Sentry, strikt CORS).
IS_PRODUCTION: Final[bool] = os.getenv("PRODUCTION", "false").lower() == "true"

#: Version som rapporteras av /health och till Sentry.
APP_VERSION: Final[str] = "0.1.0"
