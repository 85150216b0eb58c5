"""Typed domain errors for the cheap flights bot.

Errors fall into three groups that the top-level service maps to
distinct user-facing messages:

- transport and parse failures (``TransportError``, ``ResponseParseError``)
- "not found" conditions (``AirportsNotResolvedError``,
  ``TranslationNotFoundError``), rendered as informational messages
- best-effort failures (``DeepLinkError``) that never leave their stage

All errors inherit from FlightsBotError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FlightsBotError(Exception):
    """Base error for the cheap flights domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class TransportError(FlightsBotError):
    """Network-level failure (DNS, connect, timeout, HTTP status).

    Attributes:
        url: The URL that was requested
    """

    url: str = ""


@dataclass
class ResponseParseError(FlightsBotError):
    """The remote service answered with a malformed or unexpected body.

    Attributes:
        url: The URL that was requested
    """

    url: str = ""


@dataclass
class NotFoundError(FlightsBotError):
    """A lookup succeeded but produced no usable result."""


@dataclass
class AirportsNotResolvedError(NotFoundError):
    """The suggestion endpoint did not resolve both airports.

    Attributes:
        origin_code: Origin code as returned (may be empty)
        destination_code: Destination code as returned (may be empty)
    """

    origin_code: str = ""
    destination_code: str = ""


@dataclass
class TranslationNotFoundError(NotFoundError):
    """The knowledge base has no label for the requested city.

    Attributes:
        city: The city name that was looked up
        language: Source language of the lookup
    """

    city: str = ""
    language: str = ""


@dataclass
class DeepLinkError(FlightsBotError):
    """A deep link could not be built for a fare option.

    Attributes:
        date: The date string that did not split into day, month and year
    """

    date: str = ""


@dataclass
class ConfigurationError(FlightsBotError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
