"""Reply formatting for ranked fare options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..dates import with_weekday
from ..domain.errors import FlightsBotError
from ..domain.models import LocaleBundle, RankedResult
from ..ports.currency import CurrencyRatePort

SOURCE_CURRENCY = "₽"
TARGET_CURRENCY = "€"


def _plain(price: float) -> str:
    return str(int(price)) if float(price).is_integer() else str(price)


@dataclass
class PresentationFormatter:
    """Render ranked results as chat text.

    Attributes:
        currency: Exchange rate source; queried once per rendered block
        max_results: Maximum number of blocks in a reply
    """

    currency: CurrencyRatePort
    max_results: int = 5

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _rate(self) -> Optional[float]:
        try:
            rate = self.currency.rate()
        except FlightsBotError as e:
            self._logger.warning("Failed to get currency rate", extra={"error": str(e)})
            return None
        if rate == 0:
            self._logger.warning("Currency rate is zero")
            return None
        return rate

    def format_price(self, price: float) -> str:
        """Converted price when a nonzero rate is available, else the raw price."""
        rate = self._rate()
        if rate is None:
            return f"💶 {_plain(price)} {SOURCE_CURRENCY}"
        return f"💶 {rate * price:.2f} {TARGET_CURRENCY}"

    def _date(self, value: str, bundle: LocaleBundle) -> str:
        text = with_weekday(value, bundle)
        if text == value:
            self._logger.debug("Failed to derive weekday", extra={"date": value})
        return text

    def format_result(self, result: RankedResult, bundle: LocaleBundle) -> str:
        """Render one fare option block."""
        option = result.option
        return "\n".join(
            [
                self.format_price(option.price),
                f"🛫 {self._date(option.depart_date, bundle)}",
                f"🛬 {self._date(option.return_date, bundle)}",
                f"🔄 {option.number_of_changes}",
                f"🔎 {option.gate}",
                f"details: {result.link}",
            ]
        )

    def format(self, results: Sequence[RankedResult], bundle: LocaleBundle) -> str:
        """Render up to ``max_results`` blocks separated by a blank line.

        Returns an empty string for an empty input; the caller sends the
        "nothing found" message instead.
        """
        shown = results[: max(self.max_results, 0)]
        return "\n\n".join(self.format_result(result, bundle) for result in shown)
