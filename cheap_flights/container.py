"""Hand-wired dependency injection for the bot.

Ports are bound to zero-argument factories. A binding is either shared
(built on first resolve, then reused) or transient (built on every
resolve). ``Container.create_default`` holds the production wiring.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Port-to-factory bindings plus the shared instances built so far.

    Tests build an empty container and bind doubles::

        container = Container()
        container.register(CurrencyRatePort, lambda: FixedRate(0.0))
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], Tuple[Factory, bool]] = field(
        default_factory=dict, repr=False
    )
    _shared: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Factory,
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance built by an older binding."""
        with self._lock:
            self._bindings[port_type] = (factory, singleton)
            self._shared.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Build or reuse the instance bound to ``port_type``.

        Raises:
            KeyError: Nothing is bound to ``port_type``.
        """
        with self._lock:
            try:
                factory, shared = self._bindings[port_type]
            except KeyError:
                raise KeyError(f"No binding for {port_type!r}") from None

            if not shared:
                return factory()
            if port_type not in self._shared:
                self._shared[port_type] = factory()
            return self._shared[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Wire the HTTP adapters, langdetect and the services for ``config``."""
        from .adapters.currency import CurrencyConverterApiRates
        from .adapters.geocoding import TravelpayoutsAirportResolver
        from .adapters.http import HttpClient
        from .adapters.knowledge_base import WikidataSparqlClient
        from .adapters.nlp import LangDetectLanguageDetector
        from .adapters.prices import AviasalesFareSource
        from .adapters.translation import GoogleTranslateClient
        from .locales import DEFAULT_BUNDLES
        from .ports.currency import CurrencyRatePort
        from .ports.geocoding import AirportResolverPort
        from .ports.knowledge_base import KnowledgeBaseClient
        from .ports.language import LanguageDetector
        from .ports.prices import FareSourcePort
        from .ports.translation import TextTranslatorPort
        from .services import (
            CityTranslator,
            FlightSearchService,
            PresentationFormatter,
            PriceAggregator,
        )

        config = config or get_config()
        container = cls(config=config)

        # One session shared by every adapter
        container.register(HttpClient, lambda: HttpClient(config.api))

        def http() -> HttpClient:
            return container.resolve(HttpClient)

        # Lookups
        container.register(
            AirportResolverPort,
            lambda: TravelpayoutsAirportResolver(config.api, http()),
        )
        container.register(
            FareSourcePort,
            lambda: AviasalesFareSource(config.api, http()),
        )
        container.register(
            CurrencyRatePort,
            lambda: CurrencyConverterApiRates(config.api, http()),
        )

        # Localization
        container.register(
            LanguageDetector,
            lambda: LangDetectLanguageDetector(config.localization),
        )
        container.register(
            KnowledgeBaseClient,
            lambda: WikidataSparqlClient(config.api, http()),
        )
        container.register(
            TextTranslatorPort,
            lambda: GoogleTranslateClient(config.api, http()),
        )

        # Services
        container.register(
            PriceAggregator,
            lambda: PriceAggregator(
                fare_source=container.resolve(FareSourcePort),
                default_link=config.api.default_link,
                link_prefix=config.api.deep_link_prefix,
            ),
        )
        container.register(
            PresentationFormatter,
            lambda: PresentationFormatter(
                currency=container.resolve(CurrencyRatePort),
                max_results=config.presentation.max_results,
            ),
        )

        def create_city_translator() -> Optional[CityTranslator]:
            if not config.localization.translate_cities:
                return None
            return CityTranslator(
                client=container.resolve(KnowledgeBaseClient),
                target_language=config.localization.suggest_language,
            )

        def create_flight_search() -> FlightSearchService:
            return FlightSearchService(
                language_detector=container.resolve(LanguageDetector),
                airport_resolver=container.resolve(AirportResolverPort),
                price_aggregator=container.resolve(PriceAggregator),
                formatter=container.resolve(PresentationFormatter),
                bundles=DEFAULT_BUNDLES,
                city_translator=create_city_translator(),
                text_translator=container.resolve(TextTranslatorPort),
                default_language=config.localization.default_language,
                suggest_language=config.localization.suggest_language,
            )

        container.register(FlightSearchService, create_flight_search)

        return container
