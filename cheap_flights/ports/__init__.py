"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the search pipeline and the
third-party services it talks to. They enable dependency injection and
let tests swap every network call for a canned double.
"""

from .currency import CurrencyRatePort
from .geocoding import AirportResolverPort
from .knowledge_base import KnowledgeBaseClient
from .language import LanguageDetector
from .prices import FareSourcePort
from .translation import TextTranslatorPort

__all__ = [
    # Lookups
    "AirportResolverPort",
    "FareSourcePort",
    "CurrencyRatePort",
    # Localization
    "LanguageDetector",
    "KnowledgeBaseClient",
    "TextTranslatorPort",
]
