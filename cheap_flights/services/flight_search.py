"""Flight search service - Main orchestrator.

This service is what a chat transport calls for every inbound text
message. It runs the full pipeline and maps every failure class to a
localized reply:

1. Language detection and locale bundle selection
2. Optional city name translation
3. Airport resolution
4. Price aggregation
5. Reply formatting
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

from ..domain.errors import (
    FlightsBotError,
    NotFoundError,
    ResponseParseError,
    TranslationNotFoundError,
)
from ..domain.models import LocaleBundle
from ..locales import DEFAULT_BUNDLES, select_bundle
from ..ports.geocoding import AirportResolverPort
from ..ports.language import LanguageDetector
from ..ports.translation import TextTranslatorPort
from .city_translator import CityTranslator
from .formatter import PresentationFormatter
from .localizer import Localizer
from .price_aggregator import PriceAggregator

# Words that are never sent to the knowledge base
STOPWORDS = {
    "en": {
        "from", "to", "and", "via", "the", "a", "fly", "flight", "flights",
        "cheap", "cheapest", "ticket", "tickets", "find", "me", "please",
    },
    "ru": {"из", "в", "во", "до", "и"},
}

_PUNCTUATION = ".,;:!?\"'()"

# Longest city name looked up as one phrase, e.g. "rio de janeiro"
MAX_CITY_WORDS = 3


def _as_is(reply: str) -> str:
    return reply


@dataclass
class FlightSearchService:
    """Answer chat messages with the cheapest fares between two cities.

    Attributes:
        language_detector: Detects the language of inbound text
        airport_resolver: Resolves two airports from text
        price_aggregator: Ranks fare options and builds deep links
        formatter: Renders ranked options
        bundles: Locale bundles keyed by language tag
        city_translator: Optional translator of city names
        text_translator: Optional machine translation for languages
            that have no bundle
        default_language: Bundle used when the detected one is missing
        suggest_language: Language the airport endpoint understands best
    """

    language_detector: LanguageDetector
    airport_resolver: AirportResolverPort
    price_aggregator: PriceAggregator
    formatter: PresentationFormatter
    bundles: Mapping[str, LocaleBundle] = field(default_factory=lambda: DEFAULT_BUNDLES)
    city_translator: Optional[CityTranslator] = None
    text_translator: Optional[TextTranslatorPort] = None
    default_language: str = "en"
    suggest_language: str = "ru"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _localize(self, text: str) -> tuple[str, LocaleBundle, Callable[[str], str]]:
        """Detect the language and pick the bundle and reply filter for it."""
        language = self.language_detector.detect(text)
        bundle = select_bundle(self.bundles, language, self.default_language)

        say: Callable[[str], str] = _as_is
        if bundle.language != language and self.text_translator is not None:
            say = Localizer(self.text_translator, language).text

        return language, bundle, say

    def help(self, text: str = "") -> str:
        """Return the help text in the language of ``text``."""
        _, bundle, say = self._localize(text)
        return say(bundle.help)

    def _translate_span(self, language: str, phrase: str) -> Optional[str]:
        try:
            return self.city_translator.translate(language, phrase)
        except TranslationNotFoundError:
            return None
        except FlightsBotError as e:
            self._logger.warning(
                "City translation failed",
                extra={"phrase": phrase, "error": str(e)},
            )
            return None

    def translate_cities(self, language: str, text: str) -> str:
        """Replace city names with their knowledge-base translations.

        At every position the longest run of up to ``MAX_CITY_WORDS``
        words is tried first, so "new york" is looked up as one name
        before "york" alone. Stopwords never take part in a lookup, and
        words that are not found stay as typed.
        """
        if self.city_translator is None or language == self.suggest_language:
            return text

        stopwords = STOPWORDS.get(language, set())
        words = text.split()
        tokens = [word.strip(_PUNCTUATION) for word in words]
        out: List[str] = []

        i = 0
        while i < len(words):
            if not tokens[i] or tokens[i].lower() in stopwords:
                out.append(words[i])
                i += 1
                continue

            size = 1
            translated = None
            for size in range(min(MAX_CITY_WORDS, len(words) - i), 0, -1):
                span = tokens[i:i + size]
                # spans stop at stopwords and at punctuation between words
                if any(not t or t.lower() in stopwords for t in span):
                    continue
                if any(w != t for w, t in zip(words[i:i + size - 1], span)):
                    continue
                translated = self._translate_span(language, " ".join(span))
                if translated is not None:
                    break

            if translated is None:
                out.append(words[i])
                i += 1
            else:
                out.append(translated)
                i += size

        return " ".join(out)

    def search(self, text: str) -> List[str]:
        """Run the pipeline and return the replies to send, in order."""
        language, bundle, say = self._localize(text)
        query = self.translate_cities(language, text)
        self._logger.info(
            "Search started",
            extra={"lang": language, "translated": query != text},
        )

        try:
            origin, destination = self.airport_resolver.resolve(query)
        except NotFoundError as e:
            self._logger.info("Airports not resolved", extra={"error": str(e)})
            return [say(bundle.airport_data_error), say(bundle.help_instructions)]
        except ResponseParseError as e:
            self._logger.warning("Airport data malformed", extra={"error": str(e)})
            return [say(bundle.parse_error)]
        except FlightsBotError as e:
            self._logger.warning("Airport lookup failed", extra={"error": str(e)})
            return [say(bundle.request_error)]

        replies = [f"{origin.name} ➡️ {destination.name}"]

        try:
            results = self.price_aggregator.best_prices(origin, destination)
        except FlightsBotError as e:
            self._logger.warning(
                "Price lookup failed",
                extra={
                    "origin": origin.code,
                    "destination": destination.code,
                    "error": str(e),
                },
            )
            replies.append(say(bundle.request_error))
            return replies

        if not results:
            replies.append(say(bundle.nothing_found))
            return replies

        replies.append(
            say(bundle.results_header(len(results), self.formatter.max_results))
        )
        replies.append(self.formatter.format(results, bundle))
        return replies
