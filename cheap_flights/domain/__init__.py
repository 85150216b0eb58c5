"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AirportsNotResolvedError,
    ConfigurationError,
    DeepLinkError,
    FlightsBotError,
    NotFoundError,
    ResponseParseError,
    TranslationNotFoundError,
    TransportError,
)
from .models import FareOption, GeoPoint, LocaleBundle, RankedResult

__all__ = [
    # Models
    "GeoPoint",
    "FareOption",
    "RankedResult",
    "LocaleBundle",
    # Errors
    "FlightsBotError",
    "TransportError",
    "ResponseParseError",
    "NotFoundError",
    "AirportsNotResolvedError",
    "TranslationNotFoundError",
    "DeepLinkError",
    "ConfigurationError",
]
