"""Services layer - Application orchestration.

This module contains the services that turn raw lookups into replies.

Available services:
- FlightSearchService: Main service answering chat messages
- PriceAggregator: Ranks fare options and attaches deep links
- CityTranslator: Translates city names via a knowledge base
- PresentationFormatter: Renders ranked options as text
- Localizer: Best-effort machine translation of replies
"""

from .city_translator import CityTranslator
from .flight_search import FlightSearchService
from .formatter import PresentationFormatter
from .localizer import Localizer
from .price_aggregator import PriceAggregator

__all__ = [
    "FlightSearchService",
    "PriceAggregator",
    "CityTranslator",
    "PresentationFormatter",
    "Localizer",
]
