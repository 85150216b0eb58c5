"""Geocoding port - Abstraction for resolving airports from free text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoPoint


class AirportResolverPort(Protocol):
    """Port for airport resolution.

    Implementation: adapters/geocoding/travelpayouts_adapter.py

    The resolver turns a message such as "Kiev Tallinn" into an
    origin and a destination airport.
    """

    def resolve(self, text: str) -> tuple[GeoPoint, GeoPoint]:
        """Resolve origin and destination airports from text.

        Args:
            text: Raw user text naming two cities.

        Returns:
            Tuple of (origin, destination).

        Raises:
            TransportError: If the endpoint could not be reached.
            ResponseParseError: If the body is not the expected JSON.
            AirportsNotResolvedError: If either code comes back empty.
        """
        ...
