"""Shared HTTP plumbing for the adapters.

Every adapter performs a single blocking GET per call. This module maps
requests failures onto the domain taxonomy so callers can tell a
transport failure from a malformed body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import requests

from ..config import ApiConfig, get_config
from ..domain.errors import ResponseParseError, TransportError


@dataclass
class HttpClient:
    """Thin wrapper around a requests session.

    Attributes:
        config: API configuration (timeout, user agent)
        session: Session used for all requests
    """

    config: ApiConfig = field(default_factory=lambda: get_config().api)
    session: requests.Session = field(default_factory=requests.Session)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.session.headers["User-Agent"] = self.config.user_agent

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Issue a GET request.

        Raises:
            TransportError: On connection errors, timeouts or non-2xx status.
        """
        try:
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self._logger.warning(
                "HTTP request failed",
                extra={"url": url, "error": str(e)},
            )
            raise TransportError("Request failed", cause=e, url=url) from e

        self._logger.debug(
            "HTTP request done",
            extra={"url": response.url, "status": response.status_code},
        )
        return response

    def get_json(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Issue a GET request and decode a JSON body.

        Raises:
            TransportError: On network failures.
            ResponseParseError: If the body is not valid JSON.
        """
        response = self.get(url, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError("Malformed JSON body", cause=e, url=url) from e

    def get_text(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Issue a GET request and return the body decoded as UTF-8 unless
        the server names another charset.
        """
        response = self.get(url, params=params, headers=headers)
        # requests assumes ISO-8859-1 for text/* without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text
