"""Price aggregation: fetch, rank and link fare options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List

from ..domain.errors import DeepLinkError
from ..domain.models import GeoPoint, RankedResult
from ..dates import today
from ..links import SEARCH_PREFIX, build_deep_link
from ..ports.prices import FareSourcePort

DEFAULT_LINK = "aviasales.ru"


@dataclass
class PriceAggregator:
    """Rank fare options by price and attach deep links.

    Attributes:
        fare_source: Where fare options come from
        default_link: Substituted when a deep link cannot be built
        link_prefix: Prefix of the search-results links
        clock: Returns the current time; the calendar is anchored on today
    """

    fare_source: FareSourcePort
    default_link: str = DEFAULT_LINK
    link_prefix: str = SEARCH_PREFIX
    clock: Callable[[], datetime] = datetime.now

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def best_prices(self, origin: GeoPoint, destination: GeoPoint) -> List[RankedResult]:
        """Return fare options in ascending price order.

        Equal prices keep the endpoint's order. A link that cannot be
        built is replaced with ``default_link`` and the result is marked
        degraded.

        Raises:
            TransportError: If the fare source could not be reached.
            ResponseParseError: If the fare source answered garbage.
        """
        options = self.fare_source.fetch(origin, destination, today(self.clock()))
        ranked = sorted(options, key=lambda option: option.price)

        results: List[RankedResult] = []
        for option in ranked:
            try:
                link = build_deep_link(origin, destination, option, self.link_prefix)
                degraded = False
            except DeepLinkError as e:
                self._logger.warning(
                    "Failed to build deep link",
                    extra={"date": e.date, "error": str(e)},
                )
                link = self.default_link
                degraded = True
            results.append(RankedResult(option=option, link=link, degraded=degraded))

        return results
