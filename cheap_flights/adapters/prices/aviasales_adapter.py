"""Aviasales fare calendar adapter.

Query example:
    ?origin=BCN&destination=MOW&depart_date=2014-12-01&one_way=false

The response carries a ``best_prices`` array; prices are in rubles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ...config import ApiConfig, get_config
from ...domain.errors import ResponseParseError
from ...domain.models import FareOption, GeoPoint
from ..http import HttpClient


def parse_fare_option(entry: Mapping[str, Any]) -> FareOption:
    """Build a FareOption from one ``best_prices`` entry.

    Missing fields get zero or empty defaults.
    """
    return FareOption(
        price=float(entry.get("value") or 0),
        depart_date=str(entry.get("depart_date") or ""),
        return_date=str(entry.get("return_date") or ""),
        number_of_changes=int(entry.get("number_of_changes") or 0),
        gate=str(entry.get("gate") or ""),
        distance=int(entry.get("distance") or 0),
    )


@dataclass
class AviasalesFareSource:
    """Fetch round-trip fare options from the Aviasales calendar.

    Attributes:
        config: API configuration
        http: Optional HTTP client override
    """

    config: ApiConfig = field(default_factory=lambda: get_config().api)
    http: Optional[HttpClient] = None

    _http: HttpClient = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._http = self.http or HttpClient(self.config)

    def fetch(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        depart_date: str,
    ) -> List[FareOption]:
        """Fetch fare options in response order.

        Raises:
            TransportError: If the endpoint could not be reached.
            ResponseParseError: If the body does not have the expected shape.
        """
        url = self.config.fare_calendar_url
        params = {
            "origin": origin.code,
            "destination": destination.code,
            "depart_date": depart_date,
            "one_way": "false",
        }
        payload = self._http.get_json(url, params=params)
        if not isinstance(payload, Mapping):
            raise ResponseParseError("Expected a JSON object", url=url)

        entries = payload.get("best_prices") or []
        if not isinstance(entries, list):
            raise ResponseParseError("'best_prices' is not an array", url=url)

        try:
            options = [parse_fare_option(entry) for entry in entries]
        except (AttributeError, TypeError, ValueError) as e:
            raise ResponseParseError("Malformed fare entry", cause=e, url=url) from e

        self._logger.info(
            "Fare options fetched",
            extra={
                "origin": origin.code,
                "destination": destination.code,
                "count": len(options),
            },
        )
        return options
