"""Client for the keyless Google Translate endpoint.

The endpoint has a cooldown; callers should treat it as best-effort.
Responses are nested arrays whose first element lists the translated
segments, each segment's first item being the translated text:

    [[["Hello ", "Привет ", ...], ["world", "мир", ...]], ...]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import ApiConfig, get_config
from ...domain.errors import ResponseParseError
from ..http import HttpClient


@dataclass
class GoogleTranslateClient:
    """Translate free text.

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

    def translate(self, text: str, source: str, target: str) -> str:
        """Translate text from ``source`` (or 'auto') into ``target``.

        Raises:
            TransportError: If the endpoint could not be reached.
            ResponseParseError: If the body has no translated segments.
        """
        url = self.config.translate_url
        params = {
            "client": "gtx",
            "sl": source,
            "tl": target,
            "dt": "t",
            "q": text,
            "ie": "UTF-8",
            "oe": "UTF-8",
        }
        payload = self._http.get_json(url, params=params)

        try:
            segments = payload[0]
            translated = "".join(str(segment[0]) for segment in segments)
        except (IndexError, KeyError, TypeError) as e:
            raise ResponseParseError(
                "No translated data in response", cause=e, url=url
            ) from e

        self._logger.debug(
            "Text translated",
            extra={"source": source, "target": target, "length": len(text)},
        )
        return translated
