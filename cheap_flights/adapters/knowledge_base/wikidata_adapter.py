"""Wikidata Query Service client returning CSV."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import ApiConfig, get_config
from ..http import HttpClient


@dataclass
class WikidataSparqlClient:
    """Run SPARQL queries against query.wikidata.org.

    Attributes:
        config: API configuration (endpoint URL, timeout)
        http: Optional HTTP client override
    """

    config: ApiConfig = field(default_factory=lambda: get_config().api)
    http: Optional[HttpClient] = None

    _http: HttpClient = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._http = self.http or HttpClient(self.config)

    def query_csv(self, query: str) -> str:
        """Execute a query and return the raw CSV body.

        Raises:
            TransportError: If the endpoint could not be reached.
        """
        body = self._http.get_text(
            self.config.sparql_url,
            params={"query": query},
            headers={"Accept": "text/csv"},
        )
        self._logger.debug("SPARQL query done", extra={"bytes": len(body)})
        return body
