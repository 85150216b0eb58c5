"""Deep links to Aviasales search results.

Dates come from the fare calendar as '2020-01-09'. A link looks like
``aviasales.ru/search/IEV2301TLL2401123`` where:

- IEV, TLL are the origin and destination codes
- 2301, 2401 are the departure and return dates in DDMM form
- the trailing digits count adult, child and infant tickets
  (``123`` is one adult, two children, three infants)

Links built here are always for a single adult.
"""

from __future__ import annotations

from .domain.errors import DeepLinkError
from .domain.models import FareOption, GeoPoint

SEARCH_PREFIX = "aviasales.ru/search/"
PASSENGERS = "1"


def day_month(date: str) -> str:
    """Return the DDMM part of a dash-separated date.

    Raises:
        DeepLinkError: If the date does not have exactly three parts.
    """
    parts = date.split("-")
    if len(parts) != 3:
        raise DeepLinkError(f"wrong date format: {date}", date=date)
    return parts[2] + parts[1]


def build_deep_link(
    origin: GeoPoint,
    destination: GeoPoint,
    option: FareOption,
    prefix: str = SEARCH_PREFIX,
) -> str:
    """Build the search-results link for a fare option.

    Raises:
        DeepLinkError: If either date is malformed.
    """
    depart = day_month(option.depart_date)
    ret = day_month(option.return_date)
    return f"{prefix}{origin.code}{depart}{destination.code}{ret}{PASSENGERS}"
