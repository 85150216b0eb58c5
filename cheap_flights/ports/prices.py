"""Prices port - Abstraction for the fare calendar endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import FareOption, GeoPoint


class FareSourcePort(Protocol):
    """Port for fetching raw fare options.

    Implementation: adapters/prices/aviasales_adapter.py

    The source returns options in response order; ranking and deep
    links are the aggregator's job.
    """

    def fetch(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        depart_date: str,
    ) -> Sequence[FareOption]:
        """Fetch round-trip fare options.

        Args:
            origin: Departure airport.
            destination: Arrival airport.
            depart_date: Calendar anchor date, 'YYYY-MM-DD'.

        Returns:
            Fare options in the order the endpoint returned them.
        """
        ...
