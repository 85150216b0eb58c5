"""Currency port - Abstraction for a single exchange rate lookup."""

from __future__ import annotations

from typing import Protocol


class CurrencyRatePort(Protocol):
    """Port for exchange rates.

    Implementation: adapters/currency/currency_converter_adapter.py

    Every call hits the network; the rate may change between calls.
    """

    def rate(self) -> float:
        """Return the current rate from the fare currency to the display currency.

        Raises:
            TransportError: If the endpoint could not be reached.
            ResponseParseError: If the body has no rate.
        """
        ...
