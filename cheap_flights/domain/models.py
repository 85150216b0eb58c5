"""Immutable domain models for the cheap flights bot.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the values flowing through the search
pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """An airport resolved from user text.

    Attributes:
        code: Airport or city code (e.g., 'IEV', 'TLL')
        name: Human-readable name returned by the suggestion endpoint
    """

    code: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class FareOption:
    """One priced itinerary returned by the fare calendar.

    Attributes:
        price: Price in the aggregator's native currency (rubles)
        depart_date: Departure date as returned, normally 'YYYY-MM-DD'
        return_date: Return date as returned, normally 'YYYY-MM-DD'
        number_of_changes: Number of changes on the itinerary
        gate: Label of the site selling the ticket
        distance: Distance between the airports in kilometers
    """

    price: float
    depart_date: str
    return_date: str
    number_of_changes: int = 0
    gate: str = ""
    distance: int = 0


@dataclass(frozen=True, slots=True)
class RankedResult:
    """A fare option paired with its deep link.

    Attributes:
        option: The fare option
        link: Search-results URL, or the default platform link
        degraded: True when link building failed and the default was used
    """

    option: FareOption
    link: str
    degraded: bool = False


@dataclass(frozen=True, slots=True)
class LocaleBundle:
    """User-facing message templates for one language.

    ``results`` is formatted with ``total`` and ``shown``;
    ``weekdays`` starts with Monday.
    """

    language: str
    help: str
    help_instructions: str
    parse_error: str
    airport_data_error: str
    request_error: str
    nothing_found: str
    results: str
    weekdays: tuple[str, ...] = field(
        default=(
            "monday",
            "tuesday",
            "wednesday",
            "thursday",
            "friday",
            "saturday",
            "sunday",
        )
    )

    def results_header(self, total: int, shown: int) -> str:
        """Render the results-count line."""
        return self.results.format(total=total, shown=shown)

    def weekday(self, index: int) -> str:
        """Return the weekday name for ``date.weekday()`` index."""
        return self.weekdays[index]
