"""Travelpayouts airport resolver.

The widget suggestion endpoint accepts a free-text query such as
"Киев Таллин" or "Из Киева в Таллин" and answers with the best guess
for an origin and a destination:

    {"origin": {"iata": "IEV", "name": "Киев"},
     "destination": {"iata": "TLL", "name": "Таллин"}}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ...config import ApiConfig, get_config
from ...domain.errors import AirportsNotResolvedError, ResponseParseError
from ...domain.models import GeoPoint
from ..http import HttpClient


def _point(payload: Mapping[str, Any], key: str) -> GeoPoint:
    raw = payload.get(key) or {}
    if not isinstance(raw, Mapping):
        raw = {}
    return GeoPoint(
        code=str(raw.get("iata") or ""),
        name=str(raw.get("name") or ""),
    )


@dataclass
class TravelpayoutsAirportResolver:
    """Resolve two airports from user text.

    Attributes:
        config: API configuration
        http: HTTP client used for the lookup
    """

    config: ApiConfig = field(default_factory=lambda: get_config().api)
    http: Optional[HttpClient] = None

    _http: HttpClient = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._http = self.http or HttpClient(self.config)

    def resolve(self, text: str) -> tuple[GeoPoint, GeoPoint]:
        """Resolve origin and destination airports.

        Args:
            text: Raw user text; percent-encoded by the HTTP layer.

        Returns:
            Tuple of (origin, destination).

        Raises:
            TransportError: If the endpoint could not be reached.
            ResponseParseError: If the body is not a JSON object.
            AirportsNotResolvedError: If either code is empty.
        """
        url = self.config.airport_suggest_url
        payload = self._http.get_json(url, params={"q": text})
        if not isinstance(payload, Mapping):
            raise ResponseParseError("Expected a JSON object", url=url)

        origin = _point(payload, "origin")
        destination = _point(payload, "destination")

        if not origin.code or not destination.code:
            self._logger.info(
                "Airports not resolved",
                extra={"origin": origin.code, "destination": destination.code},
            )
            raise AirportsNotResolvedError(
                f"Airports were not resolved, origin: {origin.code!r}, "
                f"destination: {destination.code!r}",
                origin_code=origin.code,
                destination_code=destination.code,
            )

        self._logger.debug(
            "Airports resolved",
            extra={"origin": origin.code, "destination": destination.code},
        )
        return origin, destination
