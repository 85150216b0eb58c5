"""Exchange rate adapter for free.currencyconverterapi.com.

Compact responses look like ``{"RUB_EUR": {"val": 0.0129}}``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ...config import ApiConfig, get_config
from ...domain.errors import ResponseParseError
from ..http import HttpClient


@dataclass
class CurrencyConverterApiRates:
    """Fetch a single exchange rate; no caching, every call is live.

    Attributes:
        config: API configuration (endpoint and currency pair)
        http: Optional HTTP client override
    """

    config: ApiConfig = field(default_factory=lambda: get_config().api)
    http: Optional[HttpClient] = None

    _http: HttpClient = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._http = self.http or HttpClient(self.config)

    def rate(self) -> float:
        """Return the current rate for the configured currency pair.

        Raises:
            TransportError: If the endpoint could not be reached.
            ResponseParseError: If the body has no numeric rate.
        """
        url = self.config.currency_url
        pair = self.config.currency_pair
        payload = self._http.get_json(url, params={"q": pair, "compact": "y"})

        try:
            entry = payload[pair]
            if not isinstance(entry, Mapping):
                raise TypeError(f"{pair} is not an object")
            value = float(entry["val"])
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseParseError("Missing exchange rate", cause=e, url=url) from e

        self._logger.debug("Exchange rate fetched", extra={"pair": pair, "rate": value})
        return value
